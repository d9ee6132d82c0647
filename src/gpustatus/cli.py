import datetime
import shutil
import sys
import click

from gpustatus.commands.nvml.nvml_command import NvmlCommand
from gpustatus.commands.processes.process_table import ProcessTable
from gpustatus.configuration import DisplayOptions
from gpustatus.errors import StatusError
from gpustatus.status import collect_status, render_report

VERSION = "0.1.4"


def _terminal_width():
    if sys.stdout.isatty():
        return shutil.get_terminal_size().columns
    return None


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(VERSION, "-V", "--version", prog_name="gpustatus")
@click.option("--color", is_flag=True, help="Force colored output (even when stdout is not a tty)")
@click.option("--no-color", is_flag=True, help="Suppress colored output")
@click.option("-c", "--show-cmd", is_flag=True, help="Display the process name")
@click.option("-f", "--show-full-cmd", is_flag=True, help="Display full command and arguments of running process")
@click.option("-p", "--show-pid", is_flag=True, help="Display PID of the process")
@click.option("-F", "--show-fan", is_flag=True, help="Display GPU fan speed")
@click.option("-e", "--show-codec", is_flag=True, help="Display encoder and/or decoder utilization")
@click.option("-a", "--show-all", is_flag=True, help="Display all gpu properties above")
def status(**flags) -> None:
    """Show temperature, utilization, power, memory and processes of every NVIDIA GPU."""
    options = DisplayOptions(**flags)
    timestamp = datetime.datetime.now()
    try:
        with NvmlCommand() as nvml:
            processes = ProcessTable.snapshot()
            report = collect_status(options, nvml, processes, timestamp=timestamp)
    except StatusError as ex:
        click.secho(f"Error: {ex}", fg='red', err=True)
        sys.exit(1)

    click.echo(render_report(report, color=options.color_mode, width=_terminal_width()), color=options.color_mode)
