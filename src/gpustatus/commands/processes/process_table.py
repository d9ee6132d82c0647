import pwd
from typing import Callable, Dict, Iterable

import psutil
from gpustatus.commands.processes.models import ProcessInfo
from gpustatus.errors import ProcessLookupFailed, UserLookupFailed


class ProcessTable:
   """A one-time read of the OS process table plus user name resolution."""

   def __init__(self, processes:Iterable[ProcessInfo], getpwuid:Callable=pwd.getpwuid):
      self._processes:Dict[int,ProcessInfo] = {process.pid: process for process in processes}
      self._getpwuid = getpwuid

   @classmethod
   def snapshot(cls) -> "ProcessTable":
      processes = []
      for proc in psutil.process_iter(["name", "cmdline", "uids"]):
         info = proc.info
         if info["uids"] is None:
            continue
         processes.append(ProcessInfo(
            pid=proc.pid,
            name=info["name"] or "",
            cmdline=info["cmdline"] or [],
            uid=info["uids"].real,
         ))
      return cls(processes)

   def __len__(self):
      return len(self._processes)

   def lookup(self, pid:int) -> ProcessInfo:
      try:
         return self._processes[pid]
      except KeyError:
         raise ProcessLookupFailed(pid) from None

   def username(self, uid:int) -> str:
      try:
         return self._getpwuid(uid).pw_name
      except KeyError:
         raise UserLookupFailed(uid) from None
