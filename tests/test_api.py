import pytest
from httpx import ASGITransport, AsyncClient

from deadball_roster.api import create_app
from deadball_roster.ratings import FixedRatingSource


@pytest.fixture
async def client():
    app = create_app(rating_source_factory=FixedRatingSource)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _batting_csv() -> str:
    return """Player,Pos,G,PA,HR,2B,SO,SB,BA,OBP,SLG,WAR
Juan Soto*,RF,157,699,35,31,96,7,.288,.419,.569,7.9
Catcher One,C,120,450,18,22,90,1,.255,.320,.430,3.1
"""


def _pitching_csv() -> str:
    return """Player,ERA,G,GS,IP,SO,HR,BB
Ace Starter,2.45,32,32,200.1,220,15,40
Closer*,1.80,65,0,66.0,80,3,18
"""


def _files() -> dict[str, tuple[str, bytes, str]]:
    return {
        "batting": ("batting.csv", _batting_csv().encode(), "text/csv"),
        "pitching": ("pitching.csv", _pitching_csv().encode(), "text/csv"),
    }


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_roster_before_generation_is_404(client: AsyncClient):
    assert (await client.get("/roster")).status_code == 404
    assert (await client.get("/roster/export.csv")).status_code == 404
    assert (await client.get("/roster/export.txt")).status_code == 404


@pytest.mark.anyio
async def test_generate_with_uploaded_files(client: AsyncClient):
    resp = await client.post("/roster", files=_files(), data={"team_name": "Mudville"})
    assert resp.status_code == 200
    payload = resp.json()

    assert payload["team_name"] == "Mudville"
    assert [s["key"] for s in payload["sections"]] == [
        "lineup",
        "bench",
        "starting_pitchers",
        "relief_pitchers",
    ]
    assert [len(s["players"]) for s in payload["sections"]] == [8, 4, 5, 7]
    catcher = payload["sections"][0]["players"][0]
    assert catcher["name"] == "Catcher One"
    assert catcher["role"] == "C"
    ace = payload["sections"][2]["players"][0]
    assert ace["role"] == "d12"
    assert (ace["batting_target"], ace["on_base_target"]) == (15, 20)
    assert payload["batting_report"] == {"total_rows": 2, "accepted_rows": 2, "skipped_rows": 0}

    current = await client.get("/roster")
    assert current.json() == payload


@pytest.mark.anyio
async def test_upload_then_generate(client: AsyncClient):
    files = _files()
    resp = await client.post("/stats/batting", files={"batting": files["batting"]})
    assert resp.status_code == 200
    assert resp.json() == {"kind": "batting", "filename": "batting.csv", "rows": 2}

    resp = await client.post("/roster", data={"team_name": ""})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please upload both batting and pitching stats files with valid data."

    resp = await client.post("/stats/pitching", files={"pitching": files["pitching"]})
    assert resp.status_code == 200

    resp = await client.post("/roster", data={"team_name": ""})
    assert resp.status_code == 200
    assert resp.json()["team_name"] == "Team"


@pytest.mark.anyio
async def test_empty_upload_rejected(client: AsyncClient):
    resp = await client.post("/stats/batting", files={"batting": ("batting.csv", b"", "text/csv")})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_non_utf8_upload_rejected(client: AsyncClient):
    resp = await client.post("/stats/pitching", files={"pitching": ("p.csv", b"\xff\xfe\x00bad", "text/csv")})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_exports(client: AsyncClient):
    await client.post("/roster", files=_files(), data={"team_name": "Mudville"})

    csv_resp = await client.get("/roster/export.csv")
    assert csv_resp.status_code == 200
    assert csv_resp.headers["content-type"].startswith("text/csv")
    assert 'filename="Mudville_roster.csv"' in csv_resp.headers["content-disposition"]
    assert csv_resp.text.startswith("Mudville Roster\n")

    txt_resp = await client.get("/roster/export.txt")
    assert txt_resp.status_code == 200
    assert 'filename="Mudville_roster.txt"' in txt_resp.headers["content-disposition"]
    assert txt_resp.text.startswith("Mudville ROSTER\n")


@pytest.mark.anyio
async def test_failed_generation_keeps_previous_roster(client: AsyncClient, monkeypatch):
    await client.post("/roster", files=_files(), data={"team_name": "Mudville"})

    def boom(*args, **kwargs):
        raise RuntimeError("bad row")

    monkeypatch.setattr("deadball_roster.assembler.service.assemble_roster", boom)
    resp = await client.post("/roster", data={"team_name": "Other"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Error generating roster: bad row"

    current = await client.get("/roster")
    assert current.json()["team_name"] == "Mudville"


@pytest.mark.anyio
async def test_ui_home(client: AsyncClient):
    resp = await client.get("/ui")
    assert resp.status_code == 200
    assert "Deadball Roster Generator" in resp.text
    assert "window.print()" not in resp.text


@pytest.mark.anyio
async def test_ui_generate_redirects_with_error(client: AsyncClient):
    resp = await client.post("/ui/generate", data={"team_name": "Mudville"})
    assert resp.status_code == 303
    assert "error=" in resp.headers["location"]

    page = await client.get(resp.headers["location"])
    assert "Please upload both batting and pitching stats files with valid data." in page.text


@pytest.mark.anyio
async def test_ui_generate_renders_sheet(client: AsyncClient):
    resp = await client.post("/ui/generate", files=_files(), data={"team_name": "Mudville <Nine>"})
    assert resp.status_code == 303
    assert "notice=" in resp.headers["location"]

    page = await client.get("/ui")
    assert "Mudville &lt;Nine&gt; Roster" in page.text
    assert "window.print()" in page.text
    assert "Relief Pitcher 2" in page.text
    assert "/roster/export.csv" in page.text
