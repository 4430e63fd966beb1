"""Qt UI constants used across widgets."""

LOGIN_WINDOW_COUNT: int = 3

LOGIN_WINDOW_TITLE: str = "English Word Exam - Login"
LOGIN_HEADING: str = "English Word Exam"
LOGIN_USERNAME_LABEL: str = "Username:"
LOGIN_PASSWORD_LABEL: str = "Password:"
LOGIN_BUTTON: str = "Log in"
LOGIN_SUCCESS_MESSAGE: str = "Login successful. The word exam starts now."
LOGIN_FAILED_MESSAGE: str = "Incorrect username or password."

EXAM_WINDOW_TITLE: str = "English Word Exam - In Progress"
EXAM_HEADING: str = "Vocabulary Test"
REMAINING_TIME_TEMPLATE: str = "Time remaining: {remaining}"
QUESTION_TEMPLATE: str = "Question {number}: {word}"
NO_QUESTIONS_MESSAGE: str = "The word library is empty; there is nothing to answer."
PREV_BUTTON: str = "Previous"
NEXT_BUTTON: str = "Next"
SUBMIT_BUTTON: str = "Submit Exam"
CONFIRM_SUBMIT_TITLE: str = "Confirm Submission"
CONFIRM_SUBMIT_MESSAGE: str = "Submit the exam? Answers cannot be changed afterwards."
TIME_UP_TITLE: str = "Time is up"
TIME_UP_MESSAGE: str = "The exam time has ended; your answers were submitted automatically."

RESULT_TITLE: str = "Exam Result"
NOT_ANSWERED_TEXT: str = "Not answered"
FLOATING_WINDOW_TITLE: str = "Missed Words"
FLOATING_REFRESH_INTERVAL_MS: int = 30

RANKING_TITLE: str = "Exam Ranking"
