"""FastAPI server that lets test-takers sit the exam from a browser or script."""

from __future__ import annotations

from datetime import datetime
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
import uvicorn

from word_exam.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from word_exam.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from word_exam.core.credential_store import CredentialStore
from word_exam.core.exam_manager import ExamManager
from word_exam.core.exceptions import InvalidArgumentError, SessionNotFoundError
from word_exam.core.models import ExamResult, QuestionView


class LoginPayload(BaseModel):
    """Payload schema for starting an exam."""

    username: str
    password: str


class AnswerPayload(BaseModel):
    """Payload schema for selecting an option on the current question."""

    selected_option_index: int


class LoginResponse(BaseModel):
    session_id: str
    username: str
    question_count: int
    deadline: datetime


class QuestionResponse(BaseModel):
    word: str | None
    options: list[str]
    selected_index: int | None
    position: int
    total: int
    submitted: bool
    remaining: str


class MissedWordResponse(BaseModel):
    word: str
    correct_definition: str
    selected_definition: str | None


class ResultResponse(BaseModel):
    username: str
    score: int
    total_possible: int
    correct_count: int
    question_count: int
    auto_submitted: bool
    submitted_at: datetime
    missed: list[MissedWordResponse]


class RankingRowResponse(BaseModel):
    rank: int
    username: str
    score: int


class RankingResponse(BaseModel):
    threshold: int
    ready: bool
    entries: list[RankingRowResponse]


def _get_exam_manager_dependency(exam_manager: ExamManager):
    def dependency() -> ExamManager:
        return exam_manager

    return dependency


def _question_response(view: QuestionView | None, submitted: bool, remaining: str) -> QuestionResponse:
    if view is None:
        return QuestionResponse(
            word=None,
            options=[],
            selected_index=None,
            position=0,
            total=0,
            submitted=submitted,
            remaining=remaining,
        )
    return QuestionResponse(
        word=view.word,
        options=list(view.options),
        selected_index=view.selected_index,
        position=view.position,
        total=view.total,
        submitted=submitted,
        remaining=remaining,
    )


def _result_response(result: ExamResult) -> ResultResponse:
    return ResultResponse(
        username=result.username,
        score=result.score,
        total_possible=result.total_possible,
        correct_count=result.correct_count,
        question_count=result.question_count,
        auto_submitted=result.auto_submitted,
        submitted_at=result.submitted_at,
        missed=[
            MissedWordResponse(
                word=missed.word,
                correct_definition=missed.correct_definition,
                selected_definition=missed.selected_definition,
            )
            for missed in result.missed
        ],
    )


def create_api_app(exam_manager: ExamManager, credentials: CredentialStore) -> FastAPI:
    """Create a FastAPI application wired to the provided exam manager."""
    app = FastAPI(
        title=f"{APP_NAME} API",
        version=APP_VERSION,
        description=APP_ABOUT_TEXT,
        license_info={"name": APP_LICENSE},
    )
    exam_manager_dep = _get_exam_manager_dependency(exam_manager)

    def question_state(manager: ExamManager, session_id: str) -> QuestionResponse:
        try:
            view = manager.get_current_question(session_id)
            submitted = manager.get_result(session_id) is not None
            remaining = manager.get_remaining_text(session_id)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _question_response(view, submitted, remaining)

    @app.post("/login", status_code=201, response_model=LoginResponse)
    def login(payload: LoginPayload, manager: ExamManager = Depends(exam_manager_dep)) -> LoginResponse:
        username = payload.username.strip()
        if not credentials.verify(username, payload.password):
            raise HTTPException(status_code=401, detail="Incorrect username or password.")
        session_id = manager.start_session(username)
        view = manager.get_current_question(session_id)
        return LoginResponse(
            session_id=session_id,
            username=username,
            question_count=view.total if view is not None else 0,
            deadline=manager.get_deadline(session_id),
        )

    @app.get("/sessions/{session_id}/question", response_model=QuestionResponse)
    def get_question(session_id: str, manager: ExamManager = Depends(exam_manager_dep)) -> QuestionResponse:
        return question_state(manager, session_id)

    @app.post("/sessions/{session_id}/answer", response_model=QuestionResponse)
    def select_answer(
        session_id: str,
        payload: AnswerPayload,
        manager: ExamManager = Depends(exam_manager_dep),
    ) -> QuestionResponse:
        try:
            manager.select_answer(session_id, payload.selected_option_index)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return question_state(manager, session_id)

    @app.post("/sessions/{session_id}/previous", response_model=QuestionResponse)
    def previous_question(session_id: str, manager: ExamManager = Depends(exam_manager_dep)) -> QuestionResponse:
        try:
            manager.previous_question(session_id)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return question_state(manager, session_id)

    @app.post("/sessions/{session_id}/next", response_model=QuestionResponse)
    def next_question(session_id: str, manager: ExamManager = Depends(exam_manager_dep)) -> QuestionResponse:
        try:
            manager.next_question(session_id)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return question_state(manager, session_id)

    @app.post("/sessions/{session_id}/submit", response_model=ResultResponse)
    def submit_exam(session_id: str, manager: ExamManager = Depends(exam_manager_dep)) -> ResultResponse:
        try:
            result = manager.submit(session_id)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _result_response(result)

    @app.get("/sessions/{session_id}/result", response_model=ResultResponse)
    def get_result(session_id: str, manager: ExamManager = Depends(exam_manager_dep)) -> ResultResponse:
        try:
            result = manager.get_result(session_id)
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        if result is None:
            raise HTTPException(status_code=409, detail="Exam has not been submitted yet.")
        return _result_response(result)

    @app.get("/ranking", response_model=RankingResponse)
    def get_ranking(manager: ExamManager = Depends(exam_manager_dep)) -> RankingResponse:
        aggregator = manager.aggregator
        return RankingResponse(
            threshold=aggregator.threshold,
            ready=aggregator.has_triggered,
            entries=[
                RankingRowResponse(rank=rank, username=entry.username, score=entry.score)
                for rank, entry in enumerate(manager.get_ranking(), start=1)
            ],
        )

    return app


def start_api_server(
    exam_manager: ExamManager,
    credentials: CredentialStore,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(exam_manager, credentials)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ExamApiServer", daemon=True)
    thread.start()
    return thread
