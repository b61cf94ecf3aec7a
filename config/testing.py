import os

# Tests never talk to a real Supabase project.
SUPABASE_URL = ""
SUPABASE_KEY = ""
DATA_FILE = os.getenv("DATA_FILE", "data/attendance.test.json")
SERVERLESS = False
STRICT_COUNTS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
