import datetime
import socket
from typing import List, Optional

from gpustatus.commands.nvml.nvml_command import NvmlCommand
from gpustatus.commands.processes.process_table import ProcessTable
from gpustatus.configuration import DisplayOptions
from gpustatus.errors import EncodingError, HostnameError
from gpustatus.formatting.cells import Cell, format_row
from gpustatus.formatting.table import StatusTable
from gpustatus.models import StatusModel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class StatusReport(StatusModel):
    hostname:str
    timestamp:datetime.datetime
    driver_version:str
    rows:List[List[Cell]] = []

    @property
    def header(self) -> str:
        return f"{self.hostname}\t{self.timestamp.strftime(TIMESTAMP_FORMAT)}\t{self.driver_version}"


def get_hostname() -> str:
    try:
        return socket.gethostname()
    except UnicodeError as ex:
        raise EncodingError(ex) from ex
    except OSError as ex:
        raise HostnameError(ex) from ex


def collect_status(options:DisplayOptions, nvml:NvmlCommand, processes:ProcessTable,
                   timestamp:Optional[datetime.datetime]=None) -> StatusReport:
    """Query every device and build the full report.

    Any failure propagates before anything is returned, so callers never
    see rows for only some of the devices.
    """
    timestamp = timestamp or datetime.datetime.now()
    rows = []
    for index in range(nvml.device_count()):
        device = nvml.query_device(index, show_fan=options.show_fan, show_codec=options.show_codec)
        rows.append(format_row(device, processes, options))

    return StatusReport(
        hostname=get_hostname(),
        timestamp=timestamp,
        driver_version=nvml.driver_version(),
        rows=rows,
    )


def render_report(report:StatusReport, color:Optional[bool]=None, width:Optional[int]=None) -> str:
    table = StatusTable(color=color, width=width)
    for row in report.rows:
        table.add_row(row)
    return f"{report.header}\n{table.render()}"
