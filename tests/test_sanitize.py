"""Tests for name normalization and record sanitation."""

import unittest
import sys
from pathlib import Path

# Add src to path so we can import irishrail
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from irishrail.models import Station, Train, StationDetail, TrainDetail
from irishrail.sanitize import (
    normalize,
    sanitize_station,
    sanitize_train,
    sanitize_station_detail,
    sanitize_train_detail,
)


class TestNormalize(unittest.TestCase):
    """Test free-text canonicalization."""

    def test_case_and_punctuation_ignored(self):
        """Test case and punctuation do not affect the canonical form."""
        self.assertEqual(normalize("Dun Laoghaire"), "dunlaoghaire")
        self.assertEqual(normalize("DUNLAOGHAIRE"), "dunlaoghaire")
        self.assertEqual(normalize("Dun-Laoghaire (Mallin)"), "dunlaoghairemallin")
        self.assertEqual(normalize("Tara St."), "tarast")

    def test_digits_and_symbols_dropped(self):
        """Test digits and symbols are removed."""
        self.assertEqual(normalize("Platform 2"), "platform")
        self.assertEqual(normalize("123 !?"), "")
        self.assertEqual(normalize(""), "")

    def test_accented_letters_are_kept(self):
        """Accents are letters, so they survive and do not fold to ASCII."""
        self.assertEqual(normalize("Dún Laoghaire"), "dúnlaoghaire")
        self.assertNotEqual(normalize("Dún Laoghaire"), normalize("DUNLAOGHAIRE"))
        self.assertEqual(normalize("DÚN LAOGHAIRE"), normalize("dún laoghaire"))

    def test_output_is_lowercase_letters_only(self):
        """Test the canonical form holds only lowercase letters."""
        for text in ["Howth Junction & Donaghmede", "Sydney Parade", "M3 Parkway", "  Lansdowne\tRd  "]:
            result = normalize(text)
            self.assertTrue(all(ch.isalpha() and ch.islower() for ch in result), result)

    def test_idempotent(self):
        """Test normalizing twice changes nothing."""
        for text in ["Dún Laoghaire", "Grand Canal Dock", "CNLY", "Belfast Central!"]:
            once = normalize(text)
            self.assertEqual(normalize(once), once)


class TestSanitizeStation(unittest.TestCase):

    def test_code_trimmed(self):
        """Test station codes are trimmed."""
        station = sanitize_station(Station(code=" CNLY  ", name="Connolly"))
        self.assertEqual(station.code, "CNLY")
        self.assertEqual(station.name, "Connolly")

    def test_original_untouched(self):
        """Test the decoded station is not modified."""
        raw = Station(code="CNLY ", name="Connolly")
        sanitize_station(raw)
        self.assertEqual(raw.code, "CNLY ")

    def test_idempotent(self):
        """Test sanitizing a station twice changes nothing."""
        once = sanitize_station(Station(code=" PERSE ", name="Dublin Pearse"))
        self.assertEqual(sanitize_station(once), once)


class TestSanitizeTrain(unittest.TestCase):

    def setUp(self):
        self.raw = Train(
            code="E108 ",
            date="19 Oct 2026",
            status="R",
            message="E108\\n11:05 - Bray to Howth (5 mins late)\\nDeparted Dun Laoghaire next stop Salthill",
        )

    def test_message_flattened_and_code_prefix_removed(self):
        """Test newline escapes become separators and the code prefix goes."""
        train = sanitize_train(self.raw)
        self.assertEqual(train.code, "E108")
        self.assertEqual(
            train.message,
            "| 11:05 - Bray to Howth (5 mins late) | Departed Dun Laoghaire next stop Salthill",
        )

    def test_code_only_stripped_as_prefix(self):
        """Test the code is kept when it is not at the start."""
        train = sanitize_train(Train(code="A123", message="Terminated A123 at Athlone"))
        self.assertEqual(train.message, "Terminated A123 at Athlone")

    def test_prefix_match_is_case_sensitive(self):
        """Test a differently cased code is not stripped."""
        train = sanitize_train(Train(code="E108", message="e108 running"))
        self.assertEqual(train.message, "e108 running")

    def test_leading_whitespace_before_code(self):
        """Test the code prefix is found behind leading whitespace."""
        train = sanitize_train(Train(code="E108", message=" E108\\n11:05 Bray to Howth"))
        self.assertEqual(train.message, "| 11:05 Bray to Howth")

    def test_idempotent(self):
        """Test sanitizing twice gives the same train as sanitizing once."""
        fixtures = [
            self.raw,
            Train(code="E108", message=" E108\\n11:05 Bray to Howth"),
            Train(code=" P605", message="  \\nP605 delayed  "),
            Train(code="A123", message="Terminated A123 at Athlone"),
            Train(code="", message=" \\n "),
        ]
        for raw in fixtures:
            once = sanitize_train(raw)
            self.assertEqual(sanitize_train(once), once, raw)


class TestSanitizeStationDetail(unittest.TestCase):

    def test_known_codes_kept(self):
        """Test documented station and stop types pass through."""
        for code in ["S", "T", "O", "D"]:
            self.assertEqual(sanitize_station_detail(StationDetail(station_type=code)).station_type, code)
        for code in ["C", "N"]:
            self.assertEqual(sanitize_station_detail(StationDetail(stop_type=code)).stop_type, code)

    def test_unknown_codes_cleared(self):
        """Test undocumented station and stop types are cleared."""
        detail = sanitize_station_detail(StationDetail(station_code="CNLY", station_type="X", stop_type="Z"))
        self.assertEqual(detail.station_type, "")
        self.assertEqual(detail.stop_type, "")
        self.assertEqual(detail.station_code, "CNLY")

    def test_lowercase_codes_cleared(self):
        """Test lowercase type codes are not accepted."""
        detail = sanitize_station_detail(StationDetail(station_type="s", stop_type="c"))
        self.assertEqual((detail.station_type, detail.stop_type), ("", ""))

    def test_idempotent(self):
        """Test sanitizing a station detail twice changes nothing."""
        for raw in [StationDetail(station_type="S", stop_type="C"), StationDetail(station_type="X", stop_type="Z")]:
            once = sanitize_station_detail(raw)
            self.assertEqual(sanitize_station_detail(once), once)


class TestSanitizeTrainDetail(unittest.TestCase):

    def test_train_code_trimmed(self):
        """Test train codes are trimmed."""
        detail = sanitize_train_detail(TrainDetail(train_code=" P605 ", due_in_minutes=4))
        self.assertEqual(detail.train_code, "P605")
        self.assertEqual(detail.due_in_minutes, 4)

    def test_idempotent(self):
        """Test sanitizing a train detail twice changes nothing."""
        once = sanitize_train_detail(TrainDetail(train_code="D812  "))
        self.assertEqual(sanitize_train_detail(once), once)


if __name__ == "__main__":
    unittest.main()
