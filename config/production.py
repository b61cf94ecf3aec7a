from config.config import Config

SUPABASE_URL = Config.SUPABASE_URL
SUPABASE_KEY = Config.SUPABASE_KEY
DATA_FILE = Config.DATA_FILE
SERVERLESS = Config.SERVERLESS
STRICT_COUNTS = Config.STRICT_COUNTS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
