from typing import Optional
from pydantic import model_validator

from gpustatus.models import StatusModel


class DisplayOptions(StatusModel):
    color: bool = False
    no_color: bool = False
    show_cmd: bool = False
    show_full_cmd: bool = False
    show_pid: bool = False
    show_fan: bool = False
    show_codec: bool = False
    show_all: bool = False

    @model_validator(mode="after")
    def expand_show_all(self):
        # bypass validate_assignment, it would re-enter this validator
        if self.show_all:
            for flag in ("show_fan", "show_codec", "show_full_cmd", "show_pid"):
                object.__setattr__(self, flag, True)
        return self

    @property
    def color_mode(self) -> Optional[bool]:
        """False disables styling, True forces it, None leaves it to the terminal."""
        if self.no_color:
            return False
        if self.color:
            return True
        return None
