"""Short access mode names used by the chip tables."""

from ..models import AccessMode

R = AccessMode.READ_ONLY
RW = AccessMode.READ_WRITE
NONE = AccessMode.NO_ACCESS
