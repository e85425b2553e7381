"""Device sizing package.

Canonical responsive size buckets, width classification, breakpoint override
resolution and media query formatting.
"""

from .sizes import (  # noqa: F401
    SizeName,
    SIZE_NAMES,
    SizeRange,
    SizeTable,
    CANONICAL_TABLE,
    copy_table,
    table_to_dict,
    width_for_bucket,
    bucket_for_width,
)
from .breakpoints import (  # noqa: F401
    Breakpoints,
    BreakpointConfigError,
    SizeDraft,
    resolve_breakpoints,
    get_sizes_for_breakpoints,
    run_stages,
    recomputed_sizes,
)
from .media import (  # noqa: F401
    UnknownSizeError,
    StylesheetMeta,
    media_query_max_width,
    build_media_queries,
    build_responsive_stylesheet,
)
from .consistency import TableConsistencyResult, validate_table  # noqa: F401
