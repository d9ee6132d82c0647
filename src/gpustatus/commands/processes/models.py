from typing import List
from gpustatus.models import StatusModel


class ProcessInfo(StatusModel):
    pid:int
    name:str
    cmdline:List[str] = []
    uid:int
