import pytest

from arbor.parsers.base import BaseParser


def test_cannot_instantiate_base_parser():
    with pytest.raises(TypeError) as exc_info:
        BaseParser()

    assert "abstract" in str(exc_info.value).lower()


def test_subclass_must_implement_parse():
    class IncompleteParser(BaseParser):
        def extract_functions(self, tree):
            return []

        def extract_classes(self, tree):
            return []

        def extract_imports(self, tree):
            return []

    with pytest.raises(TypeError) as exc_info:
        IncompleteParser()

    assert "parse" in str(exc_info.value)
