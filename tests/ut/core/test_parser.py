"""hcl2json 转换单元测试"""

from __future__ import annotations

import pytest

from tfmod.core.exceptions import ConversionError
from tfmod.core.parser import Hcl2JsonParser
from tfmod.utils.shell import CommandResult


class StubExecutor:
    def __init__(self, result: CommandResult) -> None:
        self.result = result
        self.calls: list[list[str]] = []

    def execute(self, args, *, cwd=None, timeout=None) -> CommandResult:  # type: ignore[no-untyped-def]
        self.calls.append(args)
        return self.result


class TestHcl2JsonParser:
    def test_success(self) -> None:
        ex = StubExecutor(CommandResult(0, '{"module": {"net": [{"source": "./net"}]}}', ""))
        doc = Hcl2JsonParser("hcl2json", executor=ex).parse("main.tf")
        assert doc["module"]["net"][0]["source"] == "./net"
        assert ex.calls == [["hcl2json", "main.tf"]]

    @pytest.mark.parametrize(("result", "match"), [
        (CommandResult(1, "", "syntax error"), "rc=1"),
        (CommandResult(0, "{}", "warning: deprecated"), "deprecated"),
        (CommandResult(0, "not json", ""), "JSON"),
        (CommandResult(0, "[1, 2]", ""), "顶层不是对象"),
    ])
    def test_failures(self, result: CommandResult, match: str) -> None:
        parser = Hcl2JsonParser(executor=StubExecutor(result))
        with pytest.raises(ConversionError, match=match) as exc_info:
            parser.parse("bad.tf")
        assert exc_info.value.path == "bad.tf"
