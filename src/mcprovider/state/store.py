"""Local JSON state recording what the CLI has applied."""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..config.paths import DEFAULT_STATE_PATH
from ..resources.models import ResourceData
from ..utils.errors import StateError
from ..utils.logging import get_logger

logger = get_logger("state.store")

STATE_VERSION = 1


class StateStore:
    """
    Resource state keyed by address (``preset.my-preset``).

    Args:
        path: State file location (default ``.mcprovider/state.json``)
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DEFAULT_STATE_PATH
        self._resources: Dict[str, ResourceData] = {}

    def load(self) -> "StateStore":
        """
        Read the state file; a missing file is an empty state.

        Raises:
            StateError: If the file is unreadable, not JSON, or from another version
        """
        if not self.path.exists():
            logger.debug(f"No state file at {self.path}, starting empty")
            self._resources = {}
            return self
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StateError(f"State file {self.path} is not valid JSON: {e}")
        except OSError as e:
            raise StateError(f"Error reading state file {self.path}: {e}")

        if not isinstance(data, dict) or data.get("version") != STATE_VERSION:
            raise StateError(
                f"Unsupported state file {self.path}: expected version {STATE_VERSION}"
            )
        try:
            self._resources = {
                address: ResourceData(**entry)
                for address, entry in (data.get("resources") or {}).items()
            }
        except (TypeError, PydanticValidationError) as e:
            raise StateError(f"Corrupt resource entry in state file {self.path}: {e}")
        logger.debug(f"Loaded {len(self._resources)} resource(s) from {self.path}")
        return self

    def save(self) -> None:
        """
        Write the state file atomically.

        Raises:
            StateError: If the file cannot be written
        """
        data = {
            "version": STATE_VERSION,
            "resources": {
                address: self._resources[address].model_dump()
                for address in sorted(self._resources)
            },
        }
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except OSError as e:
            raise StateError(f"Failed to write state file {self.path}: {e}")
        logger.info(f"Saved state for {len(self._resources)} resource(s) to {self.path}")

    def get(self, address: str) -> Optional[ResourceData]:
        return self._resources.get(address)

    def put(self, address: str, data: ResourceData) -> None:
        """Record state; an absent resource (empty id) is removed instead."""
        if data.id:
            self._resources[address] = data
        else:
            self._resources.pop(address, None)

    def remove(self, address: str) -> None:
        self._resources.pop(address, None)

    def addresses(self) -> List[str]:
        return sorted(self._resources)

    def as_dict(self) -> Dict[str, ResourceData]:
        return dict(self._resources)

    def __contains__(self, address: str) -> bool:
        return address in self._resources

    def __len__(self) -> int:
        return len(self._resources)
