from typing import List, Optional
from gpustatus.models import StatusModel


class ComputeProcess(StatusModel):
    pid:int
    used_memory:Optional[int] = None


class DeviceSnapshot(StatusModel):
    index:int
    name:str
    temperature:int
    utilization:int
    memory_used:int
    memory_total:int
    power_usage:int
    power_limit:int
    fan_speed:Optional[int] = None
    encoder_utilization:Optional[int] = None
    decoder_utilization:Optional[int] = None
    processes:List[ComputeProcess] = []
