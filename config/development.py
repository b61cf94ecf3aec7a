import os

from config.config import Config

SUPABASE_URL = Config.SUPABASE_URL
SUPABASE_KEY = Config.SUPABASE_KEY
DATA_FILE = Config.DATA_FILE
SERVERLESS = Config.SERVERLESS
STRICT_COUNTS = Config.STRICT_COUNTS

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
