"""Name normalization and field cleanup for decoded API records."""

from dataclasses import replace

from .models import Station, StationDetail, Train, TrainDetail

# Replaces the literal two-character "\n" sequence found in public messages
MESSAGE_SEPARATOR = " | "

STATION_TYPES = {"S", "T", "O", "D"}  # Start, Timing, Other, Destination
STOP_TYPES = {"C", "N"}  # Current, Next


def normalize(name: str) -> str:
    """
    Canonicalize free text for fuzzy equality matching.

    Lower-cases the input and keeps only lowercase letters, so digits,
    punctuation and whitespace are dropped. Accented letters are letters
    and are kept as-is: "Dún Laoghaire" -> "dúnlaoghaire".
    """
    return "".join(ch for ch in name.lower() if ch.islower())


def sanitize_station(station: Station) -> Station:
    return replace(station, code=station.code.strip())


def sanitize_train(train: Train) -> Train:
    """Trim the code and flatten the public message onto one line.

    A message that starts with the train's own code has that prefix removed.
    """
    code = train.code.strip()
    message = train.message.replace("\\n", MESSAGE_SEPARATOR).strip()
    if code and message.startswith(code):
        message = message[len(code):]
    return replace(train, code=code, message=message.strip())


def sanitize_station_detail(detail: StationDetail) -> StationDetail:
    # Upstream occasionally sends undocumented codes in these fields
    station_type = detail.station_type if detail.station_type in STATION_TYPES else ""
    stop_type = detail.stop_type if detail.stop_type in STOP_TYPES else ""
    return replace(detail, station_type=station_type, stop_type=stop_type)


def sanitize_train_detail(detail: TrainDetail) -> TrainDetail:
    return replace(detail, train_code=detail.train_code.strip())
