import pytest

# Trimmed NDBC realtime2 standard meteorological report, newest row first
SAMPLE_REPORT = """#YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP  DEWP  VIS PTDY  TIDE
#yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC  degC  nmi  hPa    ft
2024 06 01 05 00 200  3.0  8.0   1.2     8   5.6 190 1018.2  17.1  16.4  12.0   MM -0.6    MM
2024 06 01 04 50 190  2.5  7.0    MM    MM    MM  MM 1017.4  17.0  16.4  12.1   MM   MM    MM
2024 06 01 04 40 190  2.0  6.0    MM    MM    MM  MM 1017.0  16.9  16.3  12.1   MM   MM    MM
2024 06 01 04 30 180  2.0  5.0   1.1     8   5.4 185 1016.9  16.9  16.3  12.0   MM   MM    MM
"""

@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT

@pytest.fixture
def tide_payload() -> dict:
    return {
        "predictions": [
            {"t": "2024-06-01 05:00", "v": "3.2", "type": "H"},
            {"t": "2024-06-01 11:14", "v": "-0.3", "type": "L"},
            {"t": "2024-06-01 17:29", "v": "3.6", "type": "H"},
        ]
    }
