from .ancestors import ancestors
from .concat import concat
from .ifilter import ifilter
from .imap import for_each, imap
from .zip import izip

__all__ = (
    "ancestors",
    "concat",
    "for_each",
    "ifilter",
    "imap",
    "izip",
)
