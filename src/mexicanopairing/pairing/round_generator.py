"""Round generation for Mexicano, Americano and fixed-partner sessions.

This module is the public entry point of the pairing pipeline. For each
round it filters the eligible players, chooses who sits out, ranks the
playing pool, divides it into courts, forms the teams on every court and
records the outcome in the session history.

Sessions whose courts run at their own pace ask for one court at a time
with :meth:`RoundGenerator.generate_round_for_court`, passing the players
already busy on other courts.
"""

# Mexicano Pairing
# Copyright (C) 2025  Mexicano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from numbers import Integral
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from mexicanopairing.constants import (
    DEFAULT_MATCHUP_PREFERENCE,
    DEFAULT_MODE,
    MIN_PLAYERS,
    MSG_INVALID_COURT_NUMBER,
    MSG_INVALID_ROUND_NUMBER,
    MSG_MIN_PLAYERS,
    MSG_MISSING_SCORE,
    PLAYERS_PER_COURT,
    PLAYERS_PER_TEAM,
)
from mexicanopairing.exceptions import (
    ConfigurationException,
    InvalidArgumentException,
    InvalidConfigurationException,
    InvalidPlayerDataException,
)
from mexicanopairing.models.config import GeneratorConfig
from mexicanopairing.models.player import Player
from mexicanopairing.models.round import Match, Round
from mexicanopairing.pairing.availability import available_players, skipping_players
from mexicanopairing.pairing.history import HistoryTracker, RoundRecord
from mexicanopairing.pairing.ranking import (
    group_courts,
    group_mixed_courts,
    group_pairs,
    partner_pairs,
    rank_pairs,
    rank_players,
)
from mexicanopairing.pairing.ratings import clamp_rating, rating_delta
from mexicanopairing.pairing.sit_out import (
    Priority,
    least_played_first,
    playing_slots,
    select_mixed_sitters,
    select_sitters,
    unit_sit_count,
)
from mexicanopairing.type_hints import Group
from mexicanopairing.utils import setup_logger

logger = setup_logger(__name__)

# Records are keyed by (round, court); court 0 marks a whole round
RecordKey = Tuple[int, int]
WHOLE_ROUND = 0


class RoundGenerator:
    """Generates rounds for one session.

    A generator owns the session history: partner and opponent counts,
    sit-out counts and play counts. Player state (status, rating, points,
    skipped rounds) is read fresh on every call, so the application can
    update players between rounds.

    Round ``n`` is always generated against the history of the rounds
    numbered below ``n``. Asking for the same round number twice
    regenerates that round instead of counting it twice.
    """

    def __init__(
        self,
        players: Sequence[Player],
        courts: int,
        balance_teams: bool = True,
        matchup_preference: Any = DEFAULT_MATCHUP_PREFERENCE,
        mode: Any = DEFAULT_MODE,
        seed: Optional[int] = None,
        history: Optional[HistoryTracker] = None,
    ):
        """Initialize the round generator.

        Args:
            players: Session players, in registration order
            courts: Number of courts available each round
            balance_teams: Break repetition ties by team rating gap
            matchup_preference: 'any' or 'mixed_only'
            mode: 'mexicano', 'americano', 'fixed_partner' or 'mixed_mexicano'
            seed: Seed for tie-breaking among equally good splits
            history: Pre-seeded history to start the session from

        Raises:
            ConfigurationException: If fewer than 4 players are supplied
            InvalidConfigurationException: If the settings or partners are invalid
        """
        if len(players) < MIN_PLAYERS:
            logger.error(f"Cannot create session with {len(players)} players")
            raise ConfigurationException(MSG_MIN_PLAYERS)

        self.config = GeneratorConfig(
            courts=courts,
            balance_teams=balance_teams,
            matchup_preference=matchup_preference,
            mode=mode,
            seed=seed,
        )
        self.players: List[Player] = list(players)
        self._check_unique_ids()

        self.team_formation = self.config.team_formation
        if self.team_formation.uses_fixed_pairs:
            self._check_partners()

        self._baseline = history.copy() if history is not None else HistoryTracker()
        self._history = self._baseline.copy()
        self._records: Dict[RecordKey, RoundRecord] = {}
        self._rounds: Dict[int, Round] = {}
        self._court_rounds: Dict[RecordKey, Round] = {}

        logger.info(
            f"Session created: {len(self.players)} players, {self.courts} courts, "
            f"{self.team_formation.value} teams"
        )

    @classmethod
    def from_config(
        cls,
        players: Sequence[Player],
        config: GeneratorConfig,
        history: Optional[HistoryTracker] = None,
    ) -> "RoundGenerator":
        """Build a generator from stored settings."""
        return cls(
            players,
            courts=config.courts,
            balance_teams=config.balance_teams,
            matchup_preference=config.matchup_preference,
            mode=config.mode,
            seed=config.seed,
            history=history,
        )

    @property
    def courts(self) -> int:
        return self.config.courts

    @property
    def history(self) -> HistoryTracker:
        """History including every round generated so far."""
        return self._history

    @property
    def rounds(self) -> Dict[int, Round]:
        """Generated rounds keyed by round number."""
        return dict(sorted(self._rounds.items()))

    @property
    def court_rounds(self) -> Dict[RecordKey, Round]:
        """Single-court rounds keyed by (round number, court)."""
        return dict(sorted(self._court_rounds.items()))

    def generate_round(self, round_number: int) -> Round:
        """Generate the pairings for ``round_number``.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            The generated Round. A round with no matches is valid when fewer
            than four players are eligible.

        Raises:
            InvalidArgumentException: If round_number is not a positive integer
        """
        number = self._validate_round_number(round_number)
        history = self._history_before(number)

        eligible = available_players(self.players, number)
        skipping = skipping_players(self.players, number)
        logger.info(
            f"Generating round {number} with {len(eligible)} eligible players"
        )

        groups, sitting = self._groups(eligible, history, self.courts, unit_sit_count)
        matches = self._form_matches(groups, history, self._rng(number), first_court=1)

        # Teams are final; only now does the round count towards history
        record = RoundRecord()
        for match in matches:
            record.add_match(match.team1, match.team2)
        record.add_sitters(sitting)
        self._store((number, WHOLE_ROUND), record)

        round_ = Round(
            number=number,
            matches=matches,
            sitting_players=sitting,
            skipping_players=skipping,
        )
        self._rounds[number] = round_

        if not matches:
            logger.info(
                f"Round {number} has no matches: {len(eligible)} eligible players"
            )
        else:
            logger.info(
                f"Round {number}: {len(matches)} matches, {len(sitting)} sitting"
            )
        return round_

    def generate_round_for_court(
        self,
        court: int,
        round_number: int,
        excluded_ids: Iterable[str] = (),
    ) -> Round:
        """Generate the next match for one court.

        Courts progress independently, so each court keeps its own round
        numbers. Players busy on other courts are passed in
        ``excluded_ids``. The players who have played least overall are put
        on court first, which keeps play counts within one of each other
        across all courts.

        Args:
            court: Court number, from 1 to the number of courts
            round_number: This court's round number (1-indexed)
            excluded_ids: Ids of players currently playing elsewhere

        Returns:
            A Round with at most one match, on ``court``. Its sitting players
            are the eligible players left waiting; a wait for a free court is
            not a sit-out and does not count as one.

        Raises:
            InvalidArgumentException: If court or round_number is invalid
        """
        number = self._validate_round_number(round_number)
        court = self._validate_court(court)
        key = (number, court)
        history = self._history_without(key)

        excluded = set(excluded_ids)
        eligible = [
            p for p in available_players(self.players, number) if p.id not in excluded
        ]
        skipping = skipping_players(self.players, number)

        groups, waiting = self._groups(eligible, history, 1, least_played_first)
        matches = self._form_matches(
            groups, history, self._rng(number, court), first_court=court
        )

        record = RoundRecord()
        for match in matches:
            record.add_match(match.team1, match.team2)
        self._store(key, record)

        round_ = Round(
            number=number,
            matches=matches,
            sitting_players=waiting,
            skipping_players=skipping,
        )
        self._court_rounds[key] = round_

        if not matches:
            logger.info(
                f"Court {court} round {number} has no match: "
                f"{len(eligible)} players free"
            )
        else:
            logger.info(f"Court {court} round {number}: {len(waiting)} waiting")
        return round_

    def update_ratings(self, match: Match) -> float:
        """Move the ratings of a scored match's players.

        The winning side gains what the losing side gives up, in proportion
        to how much better than expected it scored. Ratings feed the next
        round's court seeding.

        Returns:
            The rating change applied to each team1 player

        Raises:
            InvalidArgumentException: If the match has no valid score
            InvalidPlayerDataException: If the match holds unknown players
        """
        if not match.is_scored:
            logger.error(f"Cannot rate unscored match on court {match.court}")
            raise InvalidArgumentException(MSG_MISSING_SCORE)
        if match.team1_score < 0 or match.team2_score < 0:
            raise InvalidArgumentException(
                f"Scores cannot be negative: {match.team1_score}-{match.team2_score}"
            )

        by_id = {p.id: p for p in self.players}
        try:
            scored = Match(
                team1=tuple(by_id[p.id] for p in match.team1),
                team2=tuple(by_id[p.id] for p in match.team2),
                court=match.court,
                team1_score=match.team1_score,
                team2_score=match.team2_score,
            )
        except KeyError as e:
            raise InvalidPlayerDataException(f"Unknown player id: {e.args[0]}") from None

        delta = rating_delta(scored)
        for player in scored.team1:
            player.rating = clamp_rating(player.rating + delta)
        for player in scored.team2:
            player.rating = clamp_rating(player.rating - delta)

        logger.debug(
            "Court %s scored %s-%s; team1 ratings moved by %.3f",
            match.court,
            match.team1_score,
            match.team2_score,
            delta,
        )
        return delta

    # ---- pipeline stages ----

    def _groups(
        self,
        eligible: List[Player],
        history: HistoryTracker,
        courts: int,
        priority: Priority,
    ) -> Tuple[List[Group], List[Player]]:
        if self.team_formation.uses_fixed_pairs:
            return self._fixed_partner_groups(eligible, history, courts, priority)
        return self._individual_groups(eligible, history, courts, priority)

    def _individual_groups(
        self,
        eligible: List[Player],
        history: HistoryTracker,
        courts: int,
        priority: Priority,
    ) -> Tuple[List[Group], List[Player]]:
        """Sit-out, ranking and court grouping for individual modes."""
        slots = playing_slots(len(eligible), courts)
        if self.team_formation.uses_mixed_courts:
            playing_units, sitting_units = select_mixed_sitters(
                eligible, slots, history, priority
            )
        else:
            playing_units, sitting_units = select_sitters(
                [(p,) for p in eligible], slots, history, priority
            )
        playing = [unit[0] for unit in playing_units]
        sitting = [unit[0] for unit in sitting_units]

        ranked = rank_players(playing)
        if self.team_formation.uses_mixed_courts:
            return group_mixed_courts(ranked), sitting
        return group_courts(ranked), sitting

    def _fixed_partner_groups(
        self,
        eligible: List[Player],
        history: HistoryTracker,
        courts: int,
        priority: Priority,
    ) -> Tuple[List[Group], List[Player]]:
        """Sit-out, ranking and court grouping with pairs as the unit."""
        pairs, unpaired = partner_pairs(eligible)
        if unpaired:
            logger.warning(
                f"Players without an available partner sit out: "
                f"{[p.id for p in unpaired]}"
            )

        pairs_per_court = PLAYERS_PER_COURT // PLAYERS_PER_TEAM
        pair_slots = min(courts, len(pairs) // pairs_per_court) * pairs_per_court
        playing_pairs, sitting_pairs = select_sitters(
            pairs, pair_slots, history, priority
        )

        sitting_ids = {p.id for pair in sitting_pairs for p in pair}
        sitting_ids.update(p.id for p in unpaired)
        sitting = [p for p in eligible if p.id in sitting_ids]

        return group_pairs(rank_pairs(playing_pairs)), sitting

    def _form_matches(
        self,
        groups: List[Group],
        history: HistoryTracker,
        rng: Optional[random.Random],
        first_court: int,
    ) -> List[Match]:
        matches = []
        for court, group in enumerate(groups, start=first_court):
            team1, team2 = self.team_formation.form_teams(
                group, history, self.config.balance_teams, rng
            )
            matches.append(Match(team1=team1, team2=team2, court=court))
        return matches

    def _rng(self, number: int, court: int = WHOLE_ROUND) -> Optional[random.Random]:
        if self.config.seed is None:
            return None
        if court == WHOLE_ROUND:
            return random.Random(f"{self.config.seed}:{number}")
        return random.Random(f"{self.config.seed}:{number}:{court}")

    # ---- history bookkeeping ----

    def _history_before(self, number: int) -> HistoryTracker:
        """History made of the baseline and every round numbered below ``number``."""
        if all(key[0] < number for key in self._records):
            return self._history
        return self._rebuild(key for key in self._records if key[0] < number)

    def _history_without(self, key: RecordKey) -> HistoryTracker:
        """History of everything recorded except ``key`` itself."""
        if key not in self._records:
            return self._history
        return self._rebuild(k for k in self._records if k != key)

    def _rebuild(self, keys: Iterable[RecordKey]) -> HistoryTracker:
        history = self._baseline.copy()
        for key in sorted(keys):
            history.apply(self._records[key])
        return history

    def _store(self, key: RecordKey, record: RoundRecord) -> None:
        replacing = key in self._records
        self._records[key] = record
        if not replacing:
            self._history.apply(record)
            return

        logger.info(f"Round {key[0]} regenerated; rebuilding session history")
        self._history = self._rebuild(self._records)

    # ---- validation ----

    @staticmethod
    def _positive_int(value: Any) -> Optional[int]:
        if isinstance(value, bool):
            return None
        if isinstance(value, Integral):
            number = int(value)
        elif isinstance(value, float) and value.is_integer():
            number = int(value)
        else:
            return None
        return number if number >= 1 else None

    def _validate_round_number(self, round_number: Any) -> int:
        number = self._positive_int(round_number)
        if number is None:
            logger.error(f"Invalid round number: {round_number!r}")
            raise InvalidArgumentException(MSG_INVALID_ROUND_NUMBER)
        return number

    def _validate_court(self, court: Any) -> int:
        number = self._positive_int(court)
        if number is None or number > self.courts:
            logger.error(f"Invalid court number: {court!r}")
            raise InvalidArgumentException(MSG_INVALID_COURT_NUMBER)
        return number

    def _check_unique_ids(self) -> None:
        seen = set()
        for player in self.players:
            if player.id in seen:
                raise InvalidConfigurationException(
                    f"Duplicate player id: {player.id}"
                )
            seen.add(player.id)

    def _check_partners(self) -> None:
        """Every player needs a fixed partner, and partnerships must be mutual."""
        by_id = {p.id: p for p in self.players}
        for player in self.players:
            if not player.partner_id:
                raise InvalidConfigurationException(
                    f"Player {player.id} has no fixed partner"
                )
            partner = by_id.get(player.partner_id)
            if partner is None:
                raise InvalidConfigurationException(
                    f"Partner {player.partner_id} of player {player.id} is not in the session"
                )
            if partner.id == player.id or partner.partner_id != player.id:
                raise InvalidConfigurationException(
                    f"Partnership of {player.id} and {partner.id} is not mutual"
                )
