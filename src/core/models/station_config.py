from dataclasses import dataclass
from typing import Optional

DEFAULT_DST_NOTE = (
    "Timestamp of data is local Sydney time - UTC+10 or UTC+11 (DST).</br>\n"
    "DST runs from first Sunday of October @ 02:00 until first Sunday of April @ 03:00."
)


@dataclass
class stationConfigData:
    timezone: str = "Australia/Sydney"
    localLabel: str = "Sydney"
    title: str = "Sydney - Temperature/Humidity/Pressure"
    location: str = "North West Sydney, NSW, Australia"
    site: str = "Garage/Nerd Grotto"
    refreshSeconds: int = 30
    reportFile: str = "storage/temp_humidity.txt"
    postLogFile: Optional[str] = "storage/post.log"
    dstNote: str = DEFAULT_DST_NOTE
    escapeReport: bool = False
