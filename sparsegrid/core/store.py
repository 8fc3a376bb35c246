from collections.abc import Mapping


class SparseStore:
    """Coordinate-keyed storage of values with a declared default.

    Only values that differ from ``default`` are kept; reading any other
    coordinate returns ``default``. A store is never mutated once it has been
    handed out: :meth:`set`, :meth:`remap` and :meth:`apply` all return new stores.

    Parameters
    ----------
    entries : Mapping or iterable of ((row, col), value), optional
        Initial values.  Values equal to ``default`` are dropped.
    default :
        Value returned for every coordinate that is not stored.

    """

    __slots__ = "_entries", "_default"

    def __init__(self, entries=None, default=0):
        self._default = default
        if entries is None:
            self._entries = {}
            return
        if isinstance(entries, Mapping):
            entries = entries.items()
        self._entries = {
            (row, col): val for (row, col), val in entries if not _is_default(val, default)
        }

    @classmethod
    def _from_dict(cls, entries, default):
        # ``entries`` must already be pruned and must not be shared
        self = object.__new__(cls)
        self._entries = entries
        self._default = default
        return self

    @property
    def default(self):
        """Value of every coordinate that is not stored."""
        return self._default

    def get(self, row, col):
        return self._entries.get((row, col), self._default)

    def set(self, row, col, value):
        """Return a new store with ``value`` at (``row``, ``col``)."""
        entries = dict(self._entries)
        if _is_default(value, self._default):
            entries.pop((row, col), None)
        else:
            entries[row, col] = value
        return SparseStore._from_dict(entries, self._default)

    def entries(self):
        """Iterate over ``(row, col, value)`` of stored coordinates in row-major order."""
        for key in sorted(self._entries):
            yield (*key, self._entries[key])

    def remap(self, func):
        """Return a new store with every key moved to ``func(row, col)``."""
        return SparseStore._from_dict(
            {func(row, col): val for (row, col), val in self._entries.items()}, self._default
        )

    def apply(self, func):
        """Return a new store with ``func`` applied to every value, the default included."""
        default = func(self._default)
        entries = {}
        for key, val in self._entries.items():
            val = func(val)
            if not _is_default(val, default):
                entries[key] = val
        return SparseStore._from_dict(entries, default)

    def isequal(self, other, shape=None):
        """Compare the values observable through :meth:`get`.

        When the defaults differ, the stores can only be equal within a bounded
        ``shape`` where every coordinate is stored by at least one of them.
        """
        keys = self._entries.keys() | other._entries.keys()
        if any(self.get(*key) != other.get(*key) for key in keys):
            return False
        if self._default == other._default:
            return True
        if shape is None:
            return False
        nrows, ncols = shape
        return len(keys) == nrows * ncols

    def __eq__(self, other):
        if not isinstance(other, SparseStore):
            return NotImplemented
        return self.isequal(other)

    __hash__ = None

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def __iter__(self):
        return iter(sorted(self._entries))

    def __repr__(self):
        return f"SparseStore(nvals={len(self._entries)}, default={self._default!r})"


def _is_default(val, default):
    # ``True == 1``; booleans only match a boolean default
    if isinstance(val, bool) != isinstance(default, bool):
        return False
    return val == default
