from pathlib import Path
from typing import Union


class MessageLog:
    """
    Append-only plain-text log of contact form submissions.

    The file is opened in append mode for each entry and closed right away.
    No lock is taken; concurrent appends rely on the platform's O_APPEND
    semantics. The file is never read back or rotated.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def append(self, entry: str) -> None:
        """Append a preformatted entry to the end of the log."""
        with open(self.path, "a", encoding="utf-8") as log_file:
            log_file.write(entry)
