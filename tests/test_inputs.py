import pytest

from shiftreg import InputError, LinkedInputs, ShiftRegister, StaticInputs


def test_static_inputs_set_updates_values():
    source = StaticInputs({"in_value": 1.0}, clear=False)
    source.set(in_value=2.0)

    assert source.resolve("in_value") == 2.0
    assert source.as_dict() == {"in_value": 2.0, "clear": False}


def test_static_inputs_missing_name():
    with pytest.raises(InputError, match="max_size"):
        StaticInputs().resolve("max_size")


def test_linked_inputs_reevaluate_callables():
    calls = []

    def upstream():
        calls.append(1)
        return len(calls)

    source = LinkedInputs(counter=upstream, constant=5)

    assert source.resolve("counter") == 1
    assert source.resolve("counter") == 2
    assert source.resolve("constant") == 5


def test_linked_inputs_link_replaces_source():
    source = LinkedInputs(value=1)
    source.link("value", lambda: 2)

    assert source.resolve("value") == 2


def test_linked_inputs_missing_name():
    with pytest.raises(InputError):
        LinkedInputs().resolve("clear")


@pytest.mark.parametrize("value", [True, 2.5, "3"])
def test_max_size_rejects_non_integers(value):
    step = ShiftRegister(StaticInputs(max_size=value))

    with pytest.raises(InputError):
        step.max_size


def test_max_size_accepts_integral_float():
    step = ShiftRegister(StaticInputs(max_size=3.0))

    assert step.max_size == 3


@pytest.mark.parametrize("value", [1, "yes", None])
def test_flags_must_be_booleans(value):
    step = ShiftRegister(StaticInputs(clear=value, infinite=value))

    with pytest.raises(InputError):
        step.clear
    with pytest.raises(InputError):
        step.infinite


def test_in_value_coerces_to_float():
    step = ShiftRegister(StaticInputs(in_value=4))

    assert step.in_value == 4.0
    assert isinstance(step.in_value, float)


def test_input_errors_are_value_errors():
    step = ShiftRegister(StaticInputs(max_size="3"))

    with pytest.raises(ValueError):
        step.max_size
    with pytest.raises(ValueError):
        step.clear
