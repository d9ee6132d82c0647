import pynvml
from gpustatus.commands.nvml.models import ComputeProcess, DeviceSnapshot
from gpustatus.errors import EncodingError, TelemetryError


def _decode(value) -> str:
   if isinstance(value, bytes):
      try:
         return value.decode("utf-8")
      except UnicodeDecodeError as ex:
         raise EncodingError(ex) from ex
   return value


class NvmlCommand:
   """Reads device telemetry through one NVML handle.

   Every NVML failure is re-raised as a TelemetryError so a single broken
   device aborts the whole report.
   """

   def __init__(self, nvml=pynvml):
      self.nvml = nvml
      self._initialized = False

   def __enter__(self):
      self.init()
      return self

   def __exit__(self, exc_type, exc, tb):
      self.shutdown()

   def init(self):
      self._call(self.nvml.nvmlInit)
      self._initialized = True

   def shutdown(self):
      if self._initialized:
         self._initialized = False
         self._call(self.nvml.nvmlShutdown)

   def device_count(self) -> int:
      return self._call(self.nvml.nvmlDeviceGetCount)

   def driver_version(self) -> str:
      return _decode(self._call(self.nvml.nvmlSystemGetDriverVersion))

   def query_device(self, index:int, show_fan:bool=False, show_codec:bool=False) -> DeviceSnapshot:
      nvml = self.nvml
      handle = self._call(nvml.nvmlDeviceGetHandleByIndex, index)
      memory = self._call(nvml.nvmlDeviceGetMemoryInfo, handle)
      processes = [
         ComputeProcess(pid=process.pid, used_memory=process.usedGpuMemory)
         for process in self._call(nvml.nvmlDeviceGetComputeRunningProcesses, handle)
      ]

      snapshot = {
         "index": index,
         "name": _decode(self._call(nvml.nvmlDeviceGetName, handle)),
         "memory_used": memory.used,
         "memory_total": memory.total,
         "processes": processes,
         "temperature": self._call(nvml.nvmlDeviceGetTemperature, handle, nvml.NVML_TEMPERATURE_GPU),
         "utilization": self._call(nvml.nvmlDeviceGetUtilizationRates, handle).gpu,
      }
      if show_fan:
         snapshot["fan_speed"] = self._call(nvml.nvmlDeviceGetFanSpeed_v2, handle, 0)
      if show_codec:
         # [utilization, sampling period in us]
         snapshot["encoder_utilization"] = self._call(nvml.nvmlDeviceGetEncoderUtilization, handle)[0]
         snapshot["decoder_utilization"] = self._call(nvml.nvmlDeviceGetDecoderUtilization, handle)[0]
      snapshot["power_usage"] = self._call(nvml.nvmlDeviceGetPowerUsage, handle)
      snapshot["power_limit"] = self._call(nvml.nvmlDeviceGetPowerManagementLimit, handle)
      return DeviceSnapshot(**snapshot)

   def _call(self, fn, *args):
      try:
         return fn(*args)
      except self.nvml.NVMLError as ex:
         raise TelemetryError(ex) from ex
