from konigsberg.services.level_services import LevelServices
from konigsberg.services.game_services import GameServices
