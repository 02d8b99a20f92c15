import pytest

from arbor.config import ParserConfig
from arbor.exceptions import UnsupportedLanguageError
from arbor.models import SupportedLanguage
from arbor.summary import summarize_source


def test_summarize_python_source():
    source = '''import os
from typing import Any as A

@decorate
class Service(Base):
    def run(self, job: str) -> None:
        pass

def helper(x=1):
    return x
'''

    summary = summarize_source(source, "python")

    assert summary.result.language == SupportedLanguage.PYTHON
    assert summary.result.errors == ()
    assert [f.name for f in summary.functions] == ["run", "helper"]
    assert [c.name for c in summary.classes] == ["Service"]
    assert summary.classes[0].decorators == ["@decorate"]
    assert [i.module for i in summary.imports] == ["os", "typing"]


def test_summarize_uses_config():
    source = "def f(x: int = 1):\n    pass\n"

    summary = summarize_source(source, SupportedLanguage.PYTHON, ParserConfig(typed_default_parameters=True))

    assert summary.functions[0].parameters[0].default_value == "1"


def test_summarize_unsupported_language():
    with pytest.raises(UnsupportedLanguageError):
        summarize_source("package main\n", "go")


def test_summarize_unknown_tag():
    with pytest.raises(UnsupportedLanguageError):
        summarize_source("", "brainfuck")
