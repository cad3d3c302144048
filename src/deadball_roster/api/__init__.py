"""REST API and print-ready roster sheet."""

from __future__ import annotations

import logging
import urllib.parse
from html import escape
from typing import Callable, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from deadball_roster.api.schemas import (
    IngestReportResponse,
    RosterPlayerResponse,
    RosterResponse,
    RosterSectionResponse,
    StatsUploadResponse,
)
from deadball_roster.assembler import (
    MissingStatsError,
    RosterGenerationError,
    RosterSession,
    rating_source_from_env,
)
from deadball_roster.export import (
    RosterSection,
    export_filename,
    roster_sections,
    roster_to_csv,
    roster_to_text,
)
from deadball_roster.ingest import IngestReport, parse_stat_text
from deadball_roster.ratings import RatingSource


logger = logging.getLogger(__name__)

RatingSourceFactory = Callable[[], RatingSource]


def _report_to_response(report: IngestReport | None) -> IngestReportResponse | None:
    if report is None:
        return None
    return IngestReportResponse(
        total_rows=report.total_rows,
        accepted_rows=report.accepted_rows,
        skipped_rows=report.skipped_rows,
    )


def _section_to_response(section: RosterSection) -> RosterSectionResponse:
    return RosterSectionResponse(
        key=section.key,
        title=section.title,
        headers=list(section.headers),
        players=[
            RosterPlayerResponse(
                name=row.name,
                role=row.role,
                handedness=row.handedness,
                batting_target=row.batting_target,
                on_base_target=row.on_base_target,
                traits=row.traits,
                placeholder=row.placeholder,
            )
            for row in section.rows
        ],
    )


def _session_to_response(session: RosterSession) -> RosterResponse:
    if session.roster is None:
        raise HTTPException(status_code=404, detail="No roster has been generated")
    output = session.last_output
    return RosterResponse(
        team_name=session.display_team_name,
        sections=[_section_to_response(section) for section in roster_sections(session.roster)],
        batting_report=_report_to_response(output.batting_report if output else None),
        pitching_report=_report_to_response(output.pitching_report if output else None),
    )


async def _read_rows(upload: UploadFile | None) -> list[dict] | None:
    """Parse an uploaded CSV; ``None`` when nothing was uploaded."""

    if upload is None:
        return None
    contents = await upload.read()
    if not contents:
        return None
    try:
        text = contents.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"{upload.filename or 'upload'} is not UTF-8 text") from exc
    return parse_stat_text(text)


def _render_page(body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>Deadball Roster Generator</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }}
        main {{ background: #fff; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }}
        form {{ display: grid; gap: 1rem; margin-bottom: 2rem; max-width: 40rem; }}
        label {{ font-weight: 600; }}
        input[type=\"file\"], input[type=\"text\"] {{ width: 100%; padding: 0.5rem; border-radius: 6px; border: 1px solid #cbd5e1; }}
        button {{ padding: 0.6rem 1.2rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }}
        button.secondary {{ background: #7c3aed; }}
        .actions a {{ margin-right: 1rem; color: #2563eb; text-decoration: none; }}
        table {{ border-collapse: collapse; width: 100%; margin-top: 0.5rem; margin-bottom: 2rem; }}
        th, td {{ padding: 0.35rem 0.5rem; border-bottom: 1px solid #e2e8f0; text-align: left; }}
        h2 {{ border-bottom: 2px solid #000; padding-bottom: 0.25rem; }}
        tr.placeholder td {{ color: #64748b; font-style: italic; }}
        .flash {{ padding: 1rem; border-radius: 6px; margin-bottom: 1rem; }}
        .flash.success {{ background: #ecfdf5; color: #047857; }}
        .flash.error {{ background: #fef2f2; color: #b91c1c; }}
        @media print {{
            body {{ font-size: 12pt; margin: 0; background: #fff; }}
            main {{ box-shadow: none; padding: 0; }}
            .no-print {{ display: none; }}
            .roster-sheet {{ page-break-after: always; }}
        }}
    </style>
</head>
<body>
    <main>{body}</main>
</body>
</html>"""


def _render_section(section: RosterSection) -> str:
    header_cells = "".join(f"<th>{escape(header)}</th>" for header in section.headers)
    rows = "".join(
        f"<tr class=\"{'placeholder' if row.placeholder else ''}\">"
        + "".join(f"<td>{escape(cell)}</td>" for cell in row.cells())
        + "</tr>"
        for row in section.rows
    )
    return (
        f"<section><h2>{escape(section.title.title())}</h2>"
        f"<table><thead><tr>{header_cells}</tr></thead><tbody>{rows}</tbody></table></section>"
    )


def _render_index_page(session: RosterSession, *, notice: str | None, error: str | None) -> str:
    flash = ""
    if notice:
        flash += f"<div class=\"flash success no-print\">{escape(notice)}</div>"
    if error:
        flash += f"<div class=\"flash error no-print\">{escape(error)}</div>"

    loaded = []
    if session.batting_rows:
        loaded.append(f"{len(session.batting_rows)} batting records loaded")
    if session.pitching_rows:
        loaded.append(f"{len(session.pitching_rows)} pitching records loaded")
    loaded_html = "".join(f"<p>{escape(line)}</p>" for line in loaded)

    form_html = f"""
    <div class=\"no-print\">
        <h1>Deadball Roster Generator</h1>
        <form action=\"/ui/generate\" method=\"post\" enctype=\"multipart/form-data\">
            <label for=\"team_name\">Team Name</label>
            <input type=\"text\" id=\"team_name\" name=\"team_name\" value=\"{escape(session.team_name)}\">
            <label for=\"batting\">Batting Stats (CSV)</label>
            <input type=\"file\" id=\"batting\" name=\"batting\" accept=\".csv,.txt\">
            <label for=\"pitching\">Pitching Stats (CSV)</label>
            <input type=\"file\" id=\"pitching\" name=\"pitching\" accept=\".csv,.txt\">
            {loaded_html}
            <button type=\"submit\">Generate Roster</button>
        </form>
    </div>
    """

    sheet_html = ""
    if session.roster is not None:
        team = escape(session.display_team_name)
        sections = "".join(_render_section(section) for section in roster_sections(session.roster))
        sheet_html = f"""
        <div class=\"actions no-print\">
            <button type=\"button\" class=\"secondary\" onclick=\"window.print()\">Print Roster</button>
            <a href=\"/roster/export.csv\">Download CSV</a>
            <a href=\"/roster/export.txt\">Download TXT</a>
        </div>
        <div class=\"roster-sheet\">
            <h1 style=\"text-align:center\">{team} Roster</h1>
            {sections}
        </div>
        """

    return _render_page(flash + form_html + sheet_html)


def create_app(*, rating_source_factory: Optional[RatingSourceFactory] = None) -> FastAPI:
    app = FastAPI(title="Deadball roster generator")
    session = RosterSession()
    app.state.roster_session = session
    make_rating_source = rating_source_factory or rating_source_from_env

    def _generate(team_name: str | None) -> None:
        try:
            session.generate(team_name=team_name, rating_source=make_rating_source())
        except MissingStatsError as exc:
            raise HTTPException(status_code=400, detail=exc.message) from exc
        except RosterGenerationError as exc:
            raise HTTPException(status_code=500, detail=exc.message) from exc

    def _export_response(content: str, media_type: str, extension: str) -> Response:
        filename = export_filename(session.display_team_name, extension)
        return Response(
            content=content,
            media_type=media_type,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/stats/batting", response_model=StatsUploadResponse)
    async def upload_batting(batting: UploadFile = File(...)) -> StatsUploadResponse:
        rows = await _read_rows(batting)
        if not rows:
            raise HTTPException(status_code=400, detail="batting file is empty")
        session.batting_rows = rows
        logger.info("Loaded %s batting rows from %s", len(rows), batting.filename)
        return StatsUploadResponse(kind="batting", filename=batting.filename, rows=len(rows))

    @app.post("/stats/pitching", response_model=StatsUploadResponse)
    async def upload_pitching(pitching: UploadFile = File(...)) -> StatsUploadResponse:
        rows = await _read_rows(pitching)
        if not rows:
            raise HTTPException(status_code=400, detail="pitching file is empty")
        session.pitching_rows = rows
        logger.info("Loaded %s pitching rows from %s", len(rows), pitching.filename)
        return StatsUploadResponse(kind="pitching", filename=pitching.filename, rows=len(rows))

    @app.post("/roster", response_model=RosterResponse)
    async def generate(
        team_name: str | None = Form(None),
        batting: UploadFile | None = File(None),
        pitching: UploadFile | None = File(None),
    ) -> RosterResponse:
        batting_rows = await _read_rows(batting)
        pitching_rows = await _read_rows(pitching)
        if batting_rows is not None:
            session.batting_rows = batting_rows
        if pitching_rows is not None:
            session.pitching_rows = pitching_rows
        _generate(team_name)
        return _session_to_response(session)

    @app.get("/roster", response_model=RosterResponse)
    async def current_roster() -> RosterResponse:
        return _session_to_response(session)

    @app.get("/roster/export.csv")
    async def export_csv() -> Response:
        if session.roster is None:
            raise HTTPException(status_code=404, detail="No roster has been generated")
        content = roster_to_csv(session.roster, session.display_team_name)
        return _export_response(content, "text/csv", "csv")

    @app.get("/roster/export.txt")
    async def export_txt() -> Response:
        if session.roster is None:
            raise HTTPException(status_code=404, detail="No roster has been generated")
        content = roster_to_text(session.roster, session.display_team_name)
        return _export_response(content, "text/plain", "txt")

    @app.get("/ui", response_class=HTMLResponse)
    async def ui_home(notice: str | None = None, error: str | None = None) -> HTMLResponse:
        return HTMLResponse(_render_index_page(session, notice=notice, error=error))

    @app.post("/ui/generate")
    async def ui_generate(
        team_name: str = Form(""),
        batting: UploadFile | None = File(None),
        pitching: UploadFile | None = File(None),
    ):
        try:
            batting_rows = await _read_rows(batting)
            pitching_rows = await _read_rows(pitching)
            if batting_rows is not None:
                session.batting_rows = batting_rows
            if pitching_rows is not None:
                session.pitching_rows = pitching_rows
            _generate(team_name)
        except HTTPException as exc:
            message = urllib.parse.quote_plus(str(exc.detail))
            return RedirectResponse(f"/ui?error={message}", status_code=303)

        notice = urllib.parse.quote_plus("Roster generated")
        return RedirectResponse(f"/ui?notice={notice}", status_code=303)

    return app


def run() -> None:
    """Serve the API with uvicorn (``deadball-roster-api``)."""

    import uvicorn

    uvicorn.run(create_app(), host="127.0.0.1", port=8000)
