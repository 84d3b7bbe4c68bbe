from .models import (
    Course,
    GameFormat,
    Hole,
    MatchSide,
    MatchStatus,
    Player,
    Press,
    PressOption,
    Round,
    Segment,
    SkinsConfig,
    SkinsHoleResult,
)
from .handicap import (
    net_score,
    player_gets_stroke_on_hole,
    resolve_playing_handicap,
    stroke_allocation,
    strokes_on_hole,
)
from .match_play import hole_winner, match_points, match_status
from .nassau import PressLedger, PressNotAllowedError
from .skins import skins_by_hole, skins_payouts, skins_per_player
from .scramble import average_handicap_for_team, scramble_standings
from .schemas import RoundFile, StablefordBand, StablefordTable
from .config import (
    clear_config_cache,
    get_stableford_table,
    reset_stableford_table,
    save_stableford_table,
    update_stableford_points,
)
from .session import ScoringSession
from .round_io import load_round, round_from_file, round_to_file, save_round, save_settlement
from .excel_export import write_settlement_workbook
from .validators import validate_course, validate_round, validate_settlement

__all__ = [
    # Models
    'Course',
    'GameFormat',
    'Hole',
    'MatchSide',
    'MatchStatus',
    'Player',
    'Press',
    'PressOption',
    'Round',
    'Segment',
    'SkinsConfig',
    'SkinsHoleResult',
    # Handicap
    'net_score',
    'player_gets_stroke_on_hole',
    'resolve_playing_handicap',
    'stroke_allocation',
    'strokes_on_hole',
    # Match play and Nassau
    'hole_winner',
    'match_points',
    'match_status',
    'PressLedger',
    'PressNotAllowedError',
    # Skins
    'skins_by_hole',
    'skins_payouts',
    'skins_per_player',
    # Scramble
    'average_handicap_for_team',
    'scramble_standings',
    # Stableford configuration
    'StablefordBand',
    'StablefordTable',
    'clear_config_cache',
    'get_stableford_table',
    'reset_stableford_table',
    'save_stableford_table',
    'update_stableford_points',
    # Session
    'ScoringSession',
    # Files
    'RoundFile',
    'load_round',
    'round_from_file',
    'round_to_file',
    'save_round',
    'save_settlement',
    'write_settlement_workbook',
    # Validation
    'validate_course',
    'validate_round',
    'validate_settlement',
]
