from typing import List, Optional, Tuple, Union

import click
from gpustatus.commands.nvml.models import ComputeProcess, DeviceSnapshot
from gpustatus.commands.processes.process_table import ProcessTable
from gpustatus.configuration import DisplayOptions
from gpustatus.models import StatusModel

Color = Union[str, Tuple[int, int, int]]

TEMPERATURE_LIMIT = 50
UTILIZATION_LIMIT = 30
FAN_LIMIT = 50
CODEC_LIMIT = 30
POWER_RATIO_LIMIT = 0.5
MEMORY_RATIO_LIMIT = 0.5

FAN_COLOR = (255, 0, 255)


class Cell(StatusModel):
    text:str
    fg:Optional[Color] = None
    bold:bool = False

    def render(self, styled:bool=True) -> str:
        if not styled or not self.text:
            return self.text
        return click.style(self.text, fg=self.fg, bold=self.bold or None)


def bold_limit(value, limit, text:str, fg:Color) -> Cell:
    """Cell emphasized when value is strictly above limit."""
    return Cell(text=text, fg=fg, bold=value > limit)


def ratio(part:int, whole:int) -> float:
    if whole == 0:
        return 0.0
    return part / whole


def to_megabytes(size:int) -> int:
    return size >> 20


def format_process(process:ComputeProcess, processes:ProcessTable, options:DisplayOptions) -> str:
    info = processes.lookup(process.pid)
    entry = processes.username(info.uid)
    if options.show_full_cmd:
        entry += ":" + " ".join(info.cmdline)
    elif options.show_cmd:
        entry += ":" + info.name
    if options.show_pid:
        entry += f"/{process.pid}"

    if process.used_memory is None:
        used = "Unavailable"
    else:
        used = f"{to_megabytes(process.used_memory)}M"
    return f"{entry}({used})"


def format_row(device:DeviceSnapshot, processes:ProcessTable, options:DisplayOptions) -> List[Cell]:
    process_info = [format_process(process, processes, options) for process in device.processes]

    row = [
        Cell(text=f"[{device.index}]", fg="cyan"),
        Cell(text=device.name, fg="blue"),
        bold_limit(device.temperature, TEMPERATURE_LIMIT, f"{device.temperature}°C", "bright_red"),
        bold_limit(device.utilization, UTILIZATION_LIMIT, f"{device.utilization} %", "bright_green"),
    ]

    if options.show_fan:
        row.append(bold_limit(device.fan_speed, FAN_LIMIT, f"F: {device.fan_speed} %", FAN_COLOR))

    if options.show_codec:
        row.append(bold_limit(device.encoder_utilization, CODEC_LIMIT, f"E: {device.encoder_utilization} %", "bright_cyan"))
        row.append(bold_limit(device.decoder_utilization, CODEC_LIMIT, f"D: {device.decoder_utilization} %", "bright_cyan"))

    row.append(bold_limit(
        ratio(device.power_usage, device.power_limit),
        POWER_RATIO_LIMIT,
        f"{device.power_usage // 1000} / {device.power_limit // 1000} W",
        "magenta",
    ))
    row.append(bold_limit(
        ratio(device.memory_used, device.memory_total),
        MEMORY_RATIO_LIMIT,
        f"{to_megabytes(device.memory_used)} / {to_megabytes(device.memory_total)} MB",
        "bright_yellow",
    ))
    row.append(Cell(text=",".join(process_info), fg="yellow"))
    return row
