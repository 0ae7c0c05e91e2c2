import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from uuid6 import uuid7

from scoreboard.domain.leaderboard_rules import (
    InvalidSubmission,
    LeaderboardKey,
    normalize_player_name,
    parse_limit,
    validate_score,
)
from scoreboard.models.dc_models import (
    ErrorResponseModel,
    LeaderboardResponseModel,
    ScoreSubmissionModel,
    SubmissionResponseModel,
)
from scoreboard.models.schema_models import ScoreEntrySchema
from scoreboard.stores.base import BackingUnavailable, RankedScoreStore

leaderboard_router = APIRouter(prefix="/api/leaderboard")

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseModel},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponseModel},
}


def get_store(request: Request) -> RankedScoreStore:
    """Return the store built by the application lifespan."""
    return request.app.state.store


def backing_failure(e: BackingUnavailable) -> HTTPException:
    logging.error(f"Leaderboard store operation failed: {e!r} (cause: {e.__cause__!r})")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database operation failed",
    )


class LeaderboardAPI:
    @staticmethod
    @leaderboard_router.post(
        "/submit", response_model=SubmissionResponseModel, responses=ERROR_RESPONSES
    )
    async def submit_score(
        submission: ScoreSubmissionModel,
        store: RankedScoreStore = Depends(get_store),
    ) -> SubmissionResponseModel:
        """Validate a submission, stamp it with id and timestamp and store it

        Args:
            submission (ScoreSubmissionModel): Request body, already type checked
            store (RankedScoreStore): Store of this process

        Raises:
            HTTPException: 400 if the score is out of range, 500 if the store failed

        Returns:
            SubmissionResponseModel: The stored entry
        """
        try:
            score = validate_score(submission.score)
        except InvalidSubmission as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        entry = ScoreEntrySchema(
            id=uuid7(),
            game_type=submission.game_type,
            difficulty=submission.difficulty,
            score=score,
            player_name=normalize_player_name(submission.player_name),
            timestamp=datetime.now(timezone.utc),
            game_config=submission.game_config,
        )
        key = LeaderboardKey(submission.game_type, submission.difficulty)

        try:
            await store.submit(key, entry)
        except BackingUnavailable as e:
            raise backing_failure(e)

        logging.info(f"Score submitted for {key}: {entry}")
        return SubmissionResponseModel(success=True, entry=entry)

    @staticmethod
    @leaderboard_router.get(
        "/get", response_model=LeaderboardResponseModel, responses=ERROR_RESPONSES
    )
    async def get_leaderboard(
        game: Optional[str] = None,
        difficulty: Optional[str] = None,
        limit: Optional[str] = None,
        store: RankedScoreStore = Depends(get_store),
    ) -> LeaderboardResponseModel:
        if not game or not difficulty:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing game or difficulty parameter",
            )

        key = LeaderboardKey(game, difficulty)
        try:
            leaderboard = await store.query(key, parse_limit(limit))
        except BackingUnavailable as e:
            raise backing_failure(e)

        logging.info(f"Leaderboard fetched for {key}: {len(leaderboard)} entries")
        return LeaderboardResponseModel(
            leaderboard=leaderboard,
            game=game,
            difficulty=difficulty,
            total=len(leaderboard),
        )
