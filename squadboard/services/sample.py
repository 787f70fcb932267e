"""Sample team data for demos and development."""

from datetime import date

from ..models import (
    AttendanceRecord,
    Game,
    GameStat,
    InjuryRecord,
    Player,
    SubstitutionEntry,
    TrainingSession,
)
from .team_data import TeamData


SAMPLE_TEAM_ID = "u14-boys"


def create_sample_players() -> list[Player]:
    """
    Create a small sample roster.

    Returns:
        List of sample Player objects.
    """
    return [
        Player(id="emma-larsen", name="Emma Larsen", position="GK", jersey_number=1, team_id=SAMPLE_TEAM_ID),
        Player(id="noah-berg", name="Noah Berg", position="DF", jersey_number=4, team_id=SAMPLE_TEAM_ID),
        Player(
            id="liam-dahl",
            name="Liam Dahl",
            position="MF",
            jersey_number=8,
            team_id=SAMPLE_TEAM_ID,
            injuries=[InjuryRecord(type="Ankle sprain", start_date=date(2025, 3, 2))],
        ),
        Player(id="maja-holm", name="Maja Holm", position="FW", jersey_number=9, team_id=SAMPLE_TEAM_ID),
        Player(
            id="oskar-lund",
            name="Oskar Lund",
            position="FW",
            jersey_number=11,
            team_id=SAMPLE_TEAM_ID,
            is_sick=True,
            illness_description="Flu",
        ),
    ]


def create_sample_games() -> list[Game]:
    """
    Create sample games covering both ways of entering goals.

    The first game has itemised stats and a multi-entry substitution, the
    second only a quick result string, the third has not been played yet.

    Returns:
        List of sample Game objects.
    """
    return [
        Game(
            id="game-1",
            date=date(2025, 3, 1),
            opponent="Riverside FC",
            score="3-1",
            competition="League",
            team_id=SAMPLE_TEAM_ID,
            stats=[
                GameStat(player_id="emma-larsen", game_id="game-1", minutes=90, started=True, rating=4),
                GameStat(
                    player_id="noah-berg",
                    game_id="game-1",
                    minutes=65,
                    started=True,
                    assists=1,
                    substitutions=[SubstitutionEntry(out_minute=65, replaced_by="oskar-lund")],
                ),
                GameStat(
                    player_id="maja-holm",
                    game_id="game-1",
                    minutes=80,
                    goals=2,
                    started=True,
                    rating=5,
                    substitutions=[
                        SubstitutionEntry(out_minute=60),
                        SubstitutionEntry(in_minute=70),
                    ],
                ),
                GameStat(
                    player_id="oskar-lund",
                    game_id="game-1",
                    minutes=25,
                    goals=1,
                    assists=1,
                    substitutions=[SubstitutionEntry(in_minute=65)],
                ),
            ],
        ),
        Game(
            id="game-2",
            date=date(2025, 3, 8),
            opponent="Hillside United",
            score="1-1",
            competition="Cup",
            team_id=SAMPLE_TEAM_ID,
        ),
        Game(
            id="game-3",
            date=date(2025, 3, 15),
            opponent="Lakeside IF",
            competition="League",
            team_id=SAMPLE_TEAM_ID,
        ),
    ]


def create_sample_trainings() -> list[TrainingSession]:
    """
    Create sample training sessions.

    Returns:
        List of sample TrainingSession objects, one without attendance.
    """
    return [
        TrainingSession(
            id="training-1",
            date=date(2025, 2, 25),
            team_id=SAMPLE_TEAM_ID,
            attendance=[
                AttendanceRecord(player_id="emma-larsen", attended=True),
                AttendanceRecord(player_id="noah-berg", attended=True),
                AttendanceRecord(player_id="liam-dahl", attended=False),
                AttendanceRecord(player_id="maja-holm", attended=True),
            ],
        ),
        TrainingSession(
            id="training-2",
            date=date(2025, 2, 27),
            team_id=SAMPLE_TEAM_ID,
            attendance=[
                AttendanceRecord(player_id="emma-larsen", attended=True),
                AttendanceRecord(player_id="noah-berg", attended=False),
            ],
        ),
        TrainingSession(id="training-3", date=date(2025, 3, 4), team_id=SAMPLE_TEAM_ID),
    ]


def create_sample_team_data() -> TeamData:
    """Bundle the sample collections the way the client returns them."""
    return TeamData(
        players=create_sample_players(),
        games=create_sample_games(),
        trainings=create_sample_trainings(),
    )
