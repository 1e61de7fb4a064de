from pydantic_settings import BaseSettings
import os

class ServerConfig(BaseSettings):
    HOST: str = os.getenv('MEMORY_MATCH_HOST', '0.0.0.0')
    PORT: int = int(os.getenv('MEMORY_MATCH_PORT', 8080))
    LOG_LEVEL: str = os.getenv('MEMORY_MATCH_LOG_LEVEL', 'INFO')
    TITLE: str = 'Memory Match'

server = ServerConfig()

class LeaderboardConfig(BaseSettings):
    capacity: int = int(os.getenv('LEADERBOARD_CAPACITY', 10))
    player_name_max_length: int = int(os.getenv('PLAYER_NAME_MAX_LENGTH', 50))

leaderboard = LeaderboardConfig()
