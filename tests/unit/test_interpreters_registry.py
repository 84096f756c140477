"""Unit tests for numcalc.interpreters: lookup of numeral systems by name."""
from __future__ import annotations

import pytest

from numcalc.interpreters import (
    INTERPRETERS,
    ArabicInterpreter,
    Interpreter,
    RomanInterpreter,
    UnknownNumeralSystem,
    default_interpreters,
    get_interpreter,
)


class TestGetInterpreter:
    @pytest.mark.parametrize("name, cls", [
        ("roman", RomanInterpreter),
        ("arabic", ArabicInterpreter),
        ("ROMAN", RomanInterpreter),
    ])
    def test_known_names(self, name: str, cls: type[Interpreter]) -> None:
        assert isinstance(get_interpreter(name), cls)

    def test_returns_new_instance(self) -> None:
        assert get_interpreter("roman") is not get_interpreter("roman")

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownNumeralSystem) as excinfo:
            get_interpreter("greek")
        assert excinfo.value.system_name == "greek"
        assert "arabic, roman" in str(excinfo.value)

    def test_unknown_name_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_interpreter("")


class TestDefaults:
    def test_default_order_is_roman_then_arabic(self) -> None:
        names = [i.name for i in default_interpreters()]
        assert names == ["roman", "arabic"]

    def test_registry_contains_both_systems(self) -> None:
        assert set(INTERPRETERS) == {"roman", "arabic"}

    def test_interpreter_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Interpreter()  # type: ignore[abstract]
