# settings.py
import os
from dotenv import load_dotenv

load_dotenv()  # loads .env


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")  # json | console

# base URL used by client.SchedulerClient
SCHEDULER_HTTP = os.getenv("SCHEDULER_HTTP", f"http://localhost:{PORT}")
