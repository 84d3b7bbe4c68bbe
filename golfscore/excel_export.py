"""Scorecard and settlement export to Excel workbooks."""

import logging
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.styles import Font

from .session import ScoringSession

logger = logging.getLogger('golfscore.excel_export')

BOLD = Font(bold=True)


def _write_row(ws, row: int, values: list[Any], bold: bool = False) -> None:
    for col, value in enumerate(values, 1):
        cell = ws.cell(row=row, column=col, value=value)
        if bold:
            cell.font = BOLD


def _write_scorecard(ws, session: ScoringSession) -> None:
    """
    One block of rows per player: gross, net, and strokes received.

    Columns run Hole 1..18 followed by Front 9, Back 9 and Total.
    """
    round_ = session.round
    course = round_.course
    hole_numbers = course.hole_numbers
    totals = {row['player']: row for row in session.totals()}

    _write_row(ws, 1, ['Hole'] + hole_numbers + ['Front 9', 'Back 9', 'Total'], bold=True)
    _write_row(ws, 2, ['Par'] + [course.hole(h).par for h in hole_numbers])
    _write_row(ws, 3, ['Stroke Index'] + [course.hole(h).stroke_index for h in hole_numbers])

    row = 5
    for player in round_.players:
        player_totals = totals[player.id]
        gross = [round_.gross(player.id, h) for h in hole_numbers]
        net = [session.net_score_for_hole(player.id, h) for h in hole_numbers]
        strokes = [session.strokes_on_hole(player.id, h) for h in hole_numbers]

        _write_row(ws, row, [f'{player.name} ({player.handicap:g})'], bold=True)
        _write_row(
            ws,
            row + 1,
            ['Gross']
            + gross
            + [player_totals[span]['gross'] for span in ('front9', 'back9', 'total')],
        )
        _write_row(
            ws,
            row + 2,
            ['Net'] + net + [player_totals[span]['net'] for span in ('front9', 'back9', 'total')],
        )
        _write_row(ws, row + 3, ['Strokes'] + strokes)
        row += 5

    ws.column_dimensions['A'].width = 24


def _flatten(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, dict):
        return ', '.join(f'{k}: {_flatten(v)}' for k, v in value.items())
    if isinstance(value, list):
        return '; '.join(_flatten(v) for v in value)
    return str(value)


def _write_summary(ws, settlement: dict[str, Any]) -> None:
    """Settlement as key/value rows; tables become one row per entry."""
    row = 1
    for key, value in settlement.items():
        ws.cell(row=row, column=1, value=key).font = BOLD
        if isinstance(value, list) and value and isinstance(value[0], dict):
            headers = list(value[0].keys())
            _write_row(ws, row, [key] + headers, bold=True)
            for entry in value:
                row += 1
                _write_row(ws, row, [''] + [_flatten(entry.get(h)) for h in headers])
        elif isinstance(value, dict):
            for sub_key, sub_value in value.items():
                row += 1
                _write_row(ws, row, ['', str(sub_key), _flatten(sub_value)])
        else:
            ws.cell(row=row, column=2, value=_flatten(value))
        row += 2
    ws.column_dimensions['A'].width = 20


def write_settlement_workbook(session: ScoringSession, path: str | Path) -> dict[str, Any]:
    """
    Write a workbook with a Scorecard sheet and a Summary sheet.

    Args:
        session: Session to export
        path: Output .xlsx path

    Returns:
        The settlement written to the Summary sheet
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    settlement = session.settle()

    wb = openpyxl.Workbook()
    scorecard = wb.active
    scorecard.title = 'Scorecard'
    _write_scorecard(scorecard, session)
    _write_summary(wb.create_sheet('Summary'), settlement)

    wb.save(path)
    logger.info(f'Workbook saved to {path}')
    return settlement
