"""JSON snapshots of a player's attributes (host-side persistence)."""
from __future__ import annotations
import json
from pathlib import Path
from typing import Optional
from playerflags.core.errors import PlayerFlagsError, SnapshotLoadError
from playerflags.core.logging import logger
from playerflags.host.player import Player

class SnapshotStore:
    def __init__(self, path: Path | str = "player.json"):
        self.path = Path(path)

    def write(self, player: Player) -> Path:
        data = {
            "name": player.name,
            "user_id": player.user_id,
            "attributes": player.get_attributes(),
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True))
        logger.info("PlayerSaved", path=str(self.path), attributes=len(data["attributes"]))
        return self.path

    def read(self) -> Optional[Player]:
        if not self.path.is_file():
            return None
        try:
            data = json.loads(self.path.read_text())
            player = Player(data["name"], data.get("user_id", 0))
            for key, value in data.get("attributes", {}).items():
                player.set_attribute(key, value)
        except (ValueError, KeyError, TypeError, AttributeError, PlayerFlagsError) as e:
            logger.error("PlayerLoadFailed", path=str(self.path), error=str(e))
            raise SnapshotLoadError(str(self.path), str(e)) from e
        logger.debug("PlayerLoaded", path=str(self.path))
        return player

    def exists(self) -> bool:
        return self.path.is_file()
