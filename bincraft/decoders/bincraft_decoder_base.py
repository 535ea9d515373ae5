from abc import ABC, abstractmethod
import logging
from bincraft.models.aircraft import Aircraft
from bincraft.models.record import AircraftRecord


class BinCraftDecoderBase(ABC):
    def __init__(self) -> None:
        # Initialize a per-instance logger; subclasses should call super().__init__()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def decode_record(self, record: AircraftRecord) -> Aircraft:
        pass
