"""Skins with carryover, and skins payouts."""

from typing import Iterable, Mapping, Optional

from .models import SkinsConfig, SkinsHoleResult


def hole_skin_winner(net_by_player: Mapping[str, int]) -> Optional[str]:
    """
    Player with the outright lowest net score on a hole.

    A hole needs at least two scores to be contested; a tie for low wins
    nothing.
    """
    if len(net_by_player) < 2:
        return None
    low = min(net_by_player.values())
    leaders = [player_id for player_id, net in net_by_player.items() if net == low]
    return leaders[0] if len(leaders) == 1 else None


def skins_by_hole(
    nets_by_hole: Mapping[int, Mapping[str, int]],
    holes: Iterable[int],
    carryover: bool = True,
) -> list[SkinsHoleResult]:
    """
    Resolve skins hole by hole, in hole order.

    With carryover, each tied hole adds one skin to the next hole that
    has an outright winner. Without it, a tied hole's skin is lost.
    Holes not yet contested pass any carryover on untouched.

    Args:
        nets_by_hole: hole_number -> {player_id: net score}
        holes: Hole numbers of the course
        carryover: Whether unresolved skins carry forward

    Returns:
        One SkinsHoleResult per hole
    """
    results = []
    carried = 0

    for hole_number in sorted(holes):
        nets = nets_by_hole.get(hole_number, {})
        contested = len(nets) >= 2
        winner = hole_skin_winner(nets)
        skins = 0

        if winner is not None:
            skins = 1 + carried
            carried = 0
        elif contested and carryover:
            carried += 1

        results.append(
            SkinsHoleResult(
                hole=hole_number,
                winner=winner,
                skins=skins,
                contested=contested,
                carryover_after=carried,
            )
        )

    return results


def skins_per_player(results: Iterable[SkinsHoleResult], player_ids: Iterable[str]) -> dict[str, int]:
    """Total skins captured by each player, carried skins included."""
    totals = {player_id: 0 for player_id in player_ids}
    for result in results:
        if result.winner is not None:
            totals[result.winner] = totals.get(result.winner, 0) + result.skins
    return totals


def total_pot(config: SkinsConfig, player_count: int) -> float:
    """Pot collected under the pot policy (0 otherwise)."""
    if not config.uses_pot:
        return 0.0
    return config.pot_per_player * player_count


def value_per_skin(config: SkinsConfig, skins_won: Mapping[str, int]) -> float:
    """
    Money one skin is worth.

    Pot policy divides the pot by the skins awarded; the per-skin policy
    uses the configured stake.
    """
    if config.uses_pot:
        awarded = sum(skins_won.values())
        if awarded == 0:
            return 0.0
        return total_pot(config, len(skins_won)) / awarded
    if config.uses_value_per_skin:
        return float(config.value_per_skin)
    return 0.0


def skins_payouts(skins_won: Mapping[str, int], config: SkinsConfig) -> dict[str, float]:
    """
    Net money won or lost by each player.

    Pot policy: skins * value_per_skin - pot_per_player.
    Per-skin policy: each player settles with every other player for the
    difference in skins, at value_per_skin each.

    With no stakes configured, fewer than two players, or no skins
    awarded, everyone's payout is 0.

    Args:
        skins_won: player_id -> skins captured
        config: Skins stakes

    Returns:
        player_id -> payout (positive means the player collects)
    """
    payouts = {player_id: 0.0 for player_id in skins_won}
    awarded = sum(skins_won.values())
    if len(skins_won) < 2 or awarded == 0:
        return payouts

    if config.uses_pot:
        skin_value = value_per_skin(config, skins_won)
        for player_id, won in skins_won.items():
            payouts[player_id] = won * skin_value - config.pot_per_player
    elif config.uses_value_per_skin:
        stake = float(config.value_per_skin)
        for player_id, won in skins_won.items():
            payouts[player_id] = stake * sum(
                won - other_won
                for other_id, other_won in skins_won.items()
                if other_id != player_id
            )

    return payouts
