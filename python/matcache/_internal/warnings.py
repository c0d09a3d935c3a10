"""matcache warning categories.

These exist so users can filter/suppress matcache warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class MatCacheWarning(UserWarning):
    """Base warning category for all matcache user-facing warnings."""


class MatCacheConditionWarning(MatCacheWarning):
    """The matrix was inverted but is ill-conditioned; expect lost precision."""
