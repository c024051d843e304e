"""
Persistent seen-alert state for Tornado Watch.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Set

logger = logging.getLogger(__name__)


class AlertStore:
    """Reads and writes the set of already-reported alert identifiers."""

    def __init__(self, state_file: Path, delimiter: str = ","):
        """
        Initialize the alert store.

        Args:
            state_file: Path to the state file (one identifier per line)
            delimiter: Anything after the first delimiter on a line is ignored
        """
        self.state_file = Path(state_file)
        self.delimiter = delimiter

    def load(self) -> Set[str]:
        """
        Load processed alert identifiers from file.

        Returns:
            Set of identifiers; empty if the file is missing or unreadable
        """
        try:
            with open(self.state_file, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not load processed alerts from {self.state_file}: {e}")
            return set()

        identifiers = set()
        for line in lines:
            identifier = line.split(self.delimiter, 1)[0].strip()
            if identifier:
                identifiers.add(identifier)

        logger.debug(f"Loaded {len(identifiers)} processed alerts from {self.state_file}")
        return identifiers

    def save(self, identifiers: Iterable[str]) -> bool:
        """
        Overwrite the state file with the given identifiers.

        Args:
            identifiers: Identifiers to persist

        Returns:
            True if the file was written, False otherwise
        """
        lines = sorted(set(identifiers))
        temp_path = None
        try:
            self.state_file.parent.mkdir(parents=True, exist_ok=True)
            # The previous file stays intact until the new one is complete
            with tempfile.NamedTemporaryFile(
                'w',
                encoding='utf-8',
                dir=self.state_file.parent,
                prefix=f".{self.state_file.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_path = Path(f.name)
                for identifier in lines:
                    f.write(f"{identifier}\n")
            os.replace(temp_path, self.state_file)
        except OSError as e:
            logger.error(f"Could not save processed alerts to {self.state_file}: {e}")
            if temp_path is not None:
                self._discard(temp_path)
            return False

        logger.debug(f"Saved {len(lines)} processed alerts to {self.state_file}")
        return True

    def clear(self) -> None:
        """
        Remove the state file (for clean-slate starts).
        """
        if self.state_file.exists():
            try:
                self.state_file.unlink()
                logger.info(f"Cleared state file: {self.state_file}")
            except OSError as e:
                logger.error(f"Failed to clear state file: {e}")

    def _discard(self, temp_path: Path) -> None:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove temporary state file {temp_path}: {e}")
