import httpx
import pytest

from builders import pilot_entry
from efinmet.ingestors.errors import HttpError, NetworkError, ParseError
from efinmet.ingestors.traffic import TrafficIngestor, parse_traffic_document


def test_parse_traffic_document_maps_pilots():
    payload = {
        "general": {"version": 3},
        "pilots": [
            pilot_entry(),
            pilot_entry(callsign="OHABC", cid=7654321, flight_plan=None),
        ],
        "controllers": [],
    }

    pilots = parse_traffic_document(payload)

    assert len(pilots) == 2
    first, second = pilots
    assert first.callsign == "FIN123"
    assert first.id == 1234567
    assert first.ground_speed == 250
    assert first.flight_plan is not None
    assert first.flight_plan.departure == "EFHK"
    assert first.flight_plan.arrival == "LOWW"
    assert first.flight_plan.aircraft_short == "A320"
    assert second.callsign == "OHABC"
    assert second.flight_plan is None


def test_parse_traffic_document_empty_pilots():
    assert parse_traffic_document({"pilots": []}) == []


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {"pilots": None},
        {"pilots": [pilot_entry(latitude="far north")]},
        {"pilots": [pilot_entry(latitude="60.3")]},
        {"pilots": [pilot_entry(altitude="3000")]},
        {"pilots": [pilot_entry(cid="1234567")]},
        {"pilots": [pilot_entry(heading=90.5)]},
        {"pilots": [pilot_entry(callsign=123)]},
        {"pilots": [{k: v for k, v in pilot_entry().items() if k != "callsign"}]},
        {"pilots": [{k: v for k, v in pilot_entry().items() if k != "flight_plan"}]},
        {"pilots": [pilot_entry(flight_plan={"departure": "EFHK"})]},
    ],
)
def test_parse_traffic_document_rejects_schema_mismatch(payload):
    with pytest.raises(ParseError):
        parse_traffic_document(payload)


def test_parse_traffic_document_fails_whole_document_for_one_bad_pilot():
    payload = {"pilots": [pilot_entry(), pilot_entry(heading=None)]}

    with pytest.raises(ParseError) as excinfo:
        parse_traffic_document(payload)

    assert "pilots.1.heading" in excinfo.value.reason


@pytest.mark.anyio
async def test_traffic_ingestor_fetches_pilots():
    def handler(request: httpx.Request):
        assert request.url.path == "/v3/vatsim-data.json"
        return httpx.Response(200, json={"pilots": [pilot_entry()]})

    ingestor = TrafficIngestor(
        url="https://vatsim.test/v3/vatsim-data.json",
        transport=httpx.MockTransport(handler),
    )

    pilots = await ingestor.get_traffic()

    assert [p.callsign for p in pilots] == ["FIN123"]


@pytest.mark.anyio
async def test_traffic_ingestor_raises_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(429, text="slow down"))
    ingestor = TrafficIngestor(url="https://vatsim.test/data.json", transport=transport)

    with pytest.raises(HttpError) as excinfo:
        await ingestor.get_traffic()

    assert excinfo.value.status_code == 429


@pytest.mark.anyio
async def test_traffic_ingestor_raises_network_error_on_timeout():
    def handler(request: httpx.Request):
        raise httpx.ReadTimeout("timed out", request=request)

    ingestor = TrafficIngestor(
        url="https://vatsim.test/data.json", transport=httpx.MockTransport(handler)
    )

    with pytest.raises(NetworkError):
        await ingestor.get_traffic()


def test_parse_traffic_document_accepts_integer_coordinates():
    (record,) = parse_traffic_document({"pilots": [pilot_entry(latitude=60, longitude=25)]})

    assert record.latitude == 60.0
    assert record.longitude == 25.0
