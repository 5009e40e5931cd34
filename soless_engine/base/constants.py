""" All Application Constants declare here... """

# Python Packages
from pathlib import Path
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
PORT                            =   config('PORT', default = 3000, cast = int)
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "SOLess AI Engine",
                                "version": "1.0",
                                "description": "Knowledge-backed SOLess assistant: ingests \
                                operator documents, keeps a persona, and answers over \
                                the web and Telegram."
                            }


# Storage Constants
BASE_DIR                        =   Path(__file__).resolve().parent.parent.parent
DATA_DIR                        =   config('DATA_DIR', default = str(BASE_DIR / 'data'))
DOCS_DIR                        =   config('DOCS_DIR', default = str(BASE_DIR / 'docs'))
MAX_UPLOAD_BYTES                =   config('MAX_UPLOAD_BYTES', default = 10 * 1024 * 1024, cast = int)


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_KEY_PREFIX            =   "sk-ant-"
ANTHROPIC_MODEL                 =   config('ANTHROPIC_MODEL', default = 'claude-3-sonnet-20240229')
ANTHROPIC_MAX_TOKENS            =   config('ANTHROPIC_MAX_TOKENS', default = 1000, cast = int)
COMPLETION_TIMEOUT_SECONDS      =   config('COMPLETION_TIMEOUT_SECONDS', default = 60.0, cast = float)


# Knowledge Constants
KNOWLEDGE_CACHE_ENABLED         =   config('KNOWLEDGE_CACHE_ENABLED', default = False, cast = bool)


# Conversation Constants (0 = unbounded)
CONVERSATION_MAX_COUNT          =   config('CONVERSATION_MAX_COUNT', default = 0, cast = int)
CONVERSATION_TTL_SECONDS        =   config('CONVERSATION_TTL_SECONDS', default = 0, cast = int)


# Telegram Constants
TELEGRAM_BOT_TOKEN              =   config('TELEGRAM_BOT_TOKEN', default = '')
