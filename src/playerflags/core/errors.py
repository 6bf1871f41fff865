from __future__ import annotations

class PlayerFlagsError(Exception):
    """Base for internal errors."""

class InvalidOwnerError(PlayerFlagsError, TypeError):
    def __init__(self, owner: object):
        super().__init__(f"Flag owner must be a live Player, got {owner!r}")
        self.owner = owner

class InvalidIdentifierError(PlayerFlagsError, ValueError):
    def __init__(self, identifier: object):
        super().__init__(f"Flag identifier must be a non-empty string, got {identifier!r}")
        self.identifier = identifier

class InvalidMemberError(PlayerFlagsError, AttributeError):
    def __init__(self, flag_name: str, member: str):
        super().__init__(f"'{member}' is not a valid member of Flag '{flag_name}'")
        self.flag_name = flag_name
        self.member = member

class AttributeTypeError(PlayerFlagsError, TypeError):
    def __init__(self, key: str, value: object):
        super().__init__(f"Attribute '{key}' cannot hold a value of type {type(value).__name__}")
        self.key = key
        self.value = value

class SnapshotLoadError(PlayerFlagsError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed loading '{path}': {detail}")
        self.path = path
        self.detail = detail
