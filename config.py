import os


def _env_flag(name, default="0"):
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv('SESSION_SECRET', os.getenv('SECRET_KEY', 'dev_secret_key'))
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///course_assistant.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # OpenAI
    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4o')
    OPENAI_TIMEOUT = float(os.getenv('OPENAI_TIMEOUT')) if os.getenv('OPENAI_TIMEOUT') else None
    ANSWER_STRATEGY = os.getenv('ANSWER_STRATEGY', 'structured')  # structured | keyword

    # Sessions (token lives in the signed cookie, the record in the DB)
    SESSION_LIFETIME_HOURS = int(os.getenv('SESSION_LIFETIME_HOURS', '24'))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
