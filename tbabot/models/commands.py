"""
Slash command definitions as sent to the Discord application commands API.
"""
from enum import IntEnum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict


class OptionType(IntEnum):
    SUB_COMMAND = 1
    STRING = 3
    INTEGER = 4


CHAT_INPUT = 1


class CommandOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    type: OptionType
    required: bool = False
    # Only sub-commands carry nested options
    options: Tuple["CommandOption", ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "type": int(self.type),
        }
        if self.type is OptionType.SUB_COMMAND:
            payload["options"] = [option.to_payload() for option in self.options]
        else:
            payload["required"] = self.required
        return payload


class CommandDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    options: Tuple[CommandOption, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": CHAT_INPUT,
            "options": [option.to_payload() for option in self.options],
        }


class RegisteredCommand(BaseModel):
    """A command as acknowledged by Discord, with the id needed to delete it."""

    id: str
    name: str
    description: str = ""
    options: List[Dict[str, Any]] = []
