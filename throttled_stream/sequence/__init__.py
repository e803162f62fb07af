from .gated_sequence import (
    GatedSequence as GatedSequence,
    ThrottledStream as ThrottledStream,
)
from .sequence_state import GatedSequenceState as GatedSequenceState
from .sources import (
    iterate_async as iterate_async,
    to_async_iterator as to_async_iterator,
)
