from importlib import import_module as _import_module


def get_config():
    from pathlib import Path

    import donfig
    import yaml

    config = donfig.Config("sparsegrid")
    path = Path(__file__).parent / "sparsegrid.yaml"
    with path.open() as f:
        defaults = yaml.safe_load(f)
    config.update_defaults(defaults)
    return config


config = get_config()
del get_config

_SPECIAL_ATTRS = {
    "Matrix",
    "Recorder",
    "SparseStore",
    "core",
    "exceptions",
    "formatting",
    "io",
}


def __getattr__(name):
    """Lazily import the public classes and submodules."""
    if name in _SPECIAL_ATTRS:
        if name not in globals():
            _load(name)
        return globals()[name]
    if name == "__version__":
        from importlib.metadata import version

        try:
            return globals().setdefault("__version__", version("python-sparsegrid"))
        except Exception as exc:  # pragma: no cover (safety)
            raise AttributeError(
                "`sparsegrid.__version__` not available. This may mean python-sparsegrid was "
                "incorrectly installed or not installed at all. For local development, you may "
                "want to do an editable install via `python -m pip install -e path/to/sparsegrid`."
            ) from exc
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    names = globals().keys() | _SPECIAL_ATTRS
    names.add("__version__")
    return list(names)


_CLASS_MODULES = {
    "Matrix": "matrix",
    "Recorder": "recorder",
    "SparseStore": "store",
}


def _load(name):
    if name in _CLASS_MODULES:
        module = _import_module(f".core.{_CLASS_MODULES[name]}", __name__)
        globals()[name] = getattr(module, name)
    else:
        # Everything else is a module
        globals()[name] = _import_module(f".{name}", __name__)


__all__ = [key for key in __dir__() if not key.startswith("_")]
