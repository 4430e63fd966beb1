"""Static metadata describing WordExam."""

APP_NAME = "WordExam"
APP_VERSION = "1.0.0"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "WordExam runs timed multiple-choice vocabulary exams for several test-takers "
    "at once and ranks their scores once enough of them have finished."
)
