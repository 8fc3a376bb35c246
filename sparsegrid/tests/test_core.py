import pytest

import sparsegrid as sg


def test_import_special_attrs():
    not_hidden = {x for x in dir(sg) if not x.startswith("__")}
    # Is everything imported?
    assert len(not_hidden & sg._SPECIAL_ATTRS) == len(sg._SPECIAL_ATTRS)
    # Is everything special that needs to be?
    not_special = {x for x in dir(sg) if not x.startswith("_")} - sg._SPECIAL_ATTRS
    assert not_special == {"config", "tests"} or not_special == {"config"}


def test_lazy_classes():
    from sparsegrid.core.matrix import Matrix
    from sparsegrid.core.recorder import Recorder
    from sparsegrid.core.store import SparseStore

    assert sg.Matrix is Matrix
    assert sg.Recorder is Recorder
    assert sg.SparseStore is SparseStore
    assert sg.exceptions.DimensionMismatch.__module__ == "sparsegrid.exceptions"


def test_bad_attribute():
    with pytest.raises(AttributeError, match="has no attribute 'not_a_thing'"):
        sg.not_a_thing


def test_config_defaults():
    assert sg.config.get("formatting.cell_width") == 8
    assert sg.config.get("recorder.max_rows") == 20
    with sg.config.set({"formatting.cell_width": 12}):
        assert sg.config.get("formatting.cell_width") == 12
    assert sg.config.get("formatting.cell_width") == 8


def test_bad_type_message():
    M = sg.Matrix(2, 2)
    with pytest.raises(TypeError) as excinfo:
        M.product(5)
    assert str(excinfo.value) == (
        "Bad type for argument `other` in Matrix.product(...).\n"
        "    - Expected type: Matrix.\n"
        "    - Got: <class 'int'>."
    )
