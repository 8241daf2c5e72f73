"""Development / WSGI entry point.

Usage:
    python app.py
    gunicorn -w 4 -b 0.0.0.0:5000 app:app
"""

import os

from src.school_attendance.school_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "5000")))
