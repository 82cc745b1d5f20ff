"""
Central configuration for the chat responder.
All tunable parameters in one place.
"""
import os

# ── Paths ──────────────────────────────────────────────
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")

# Data Files
CHAT_DATA_FILE = os.path.join(DATA_DIR, "chat.json")
RAW_EXCEL_FILE = os.path.join(DATA_DIR, "data.xlsx")
RAW_DATA_FILE = os.path.join(DATA_DIR, "data.txt")
EXCEL_SHEET_NAME = "Sheet1"

# Evaluation
TEST_DATA_FILE = os.path.join(DATA_DIR, "test_data.csv")
REPORT_FILE = os.path.join(BASE_DIR, "evaluation_report.csv")

# ── Matching ──────────────────────────────────────────
# A corpus entry is accepted only if its score is strictly above this
MATCH_THRESHOLD = 0.5

# Suggestions offered when nothing is accepted
SUGGESTION_LIMIT = 3
SUGGESTION_FLOOR = 0.2

# ── Weather (Open-Meteo) ──────────────────────────────
WEATHER_API_URL = "https://api.open-meteo.com/v1/forecast"
WEATHER_TIMEOUT = 10

# ── Messages ──────────────────────────────────────────
GREETING_MESSAGE = "Hello! How can I help you?"
UNKNOWN_MESSAGE = "I don't understand that."
CALCULATOR_OPEN_MESSAGE = "Here's your calculator."
CALCULATOR_BUSY_MESSAGE = "Please use the calculator above. Type 'Exit' to close it."
CALCULATOR_CLOSED_MESSAGE = "Calculator closed."
LOCATION_MESSAGE = "Couldn't access your location."
WEATHER_FAILED_MESSAGE = "Couldn't get the weather right now."

# ── Web UI ────────────────────────────────────────────
APP_HOST = "0.0.0.0"
APP_PORT = 7860
