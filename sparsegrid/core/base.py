from contextvars import ContextVar

_recorder = ContextVar("recorder")
_prev_recorder = None


def call(method_name, func, args, **kwargs):
    """Call ``func(*args, **kwargs)`` and record it as ``method_name`` with the active Recorder.

    Only ``args`` are recorded.  Calls that raise are recorded too (with the
    exception type) before re-raising.
    """
    try:
        rv = func(*args, **kwargs)
    except Exception as exc:
        # Record calls that fail for easier debugging
        rec = _recorder.get(_prev_recorder)
        if rec is not None:
            rec.record(method_name, args, exc=exc)
        raise
    rec = _recorder.get(_prev_recorder)
    if rec is not None:
        rec.record(method_name, args, rv=rv)
    return rv


def _expect_type_message(self, x, types, *, within, argname=None, keyword_name=None):
    if type(types) is tuple:
        if isinstance(x, types):
            return x, None
    elif isinstance(x, types):
        return x, None
    if argname:
        argmsg = f"for argument `{argname}` "
    elif keyword_name:
        argmsg = f"for keyword argument `{keyword_name}=` "
    else:
        argmsg = ""
    owner = self.__name__ if isinstance(self, type) else type(self).__name__
    if type(types) is tuple:
        expected = ", ".join(typ.__name__ for typ in types)
    else:
        expected = types.__name__
    return x, (
        f"Bad type {argmsg}in {owner}.{within}(...).\n"
        f"    - Expected type: {expected}.\n"
        f"    - Got: {type(x)}."
    )


def _expect_type(self, x, types, **kwargs):
    x, message = _expect_type_message(self, x, types, **kwargs)
    if message is not None:
        raise TypeError(message) from None
    return x


class BaseType:
    __slots__ = "name", "__weakref__"

    _expect_type = _expect_type

    def __bool__(self):
        raise TypeError(
            f"__bool__ not defined for objects of type {type(self)}.  "
            "Perhaps use .nvals attribute instead."
        )
