# Настройки игры
# Поле 20x20, клетка 20 пикселей
GRID_SIZE = 20
CELL_SIZE = 20
WIDTH = GRID_SIZE * CELL_SIZE    # 400
HEIGHT = GRID_SIZE * CELL_SIZE   # 400
PANEL_WIDTH = 200

# Скорость (интервал тика в мс, меньше = быстрее)
INITIAL_SPEED = 150
MIN_SPEED = 50
SPEED_STEP = 10
POINTS_PER_LEVEL = 100

# Начальное положение
START_CELL = (10, 10)
START_DIRECTION = "right"

# Еда
NORMAL_POINTS = 10
BONUS_POINTS = 25
BONUS_CHANCE = 0.2
DEFAULT_FOOD = (15, 15)

# Хранилища (задержка в мс, как у настоящего API)
SESSION_ID = 1
STORE_LATENCY = {
    "get_all": 200,
    "get_by_id": 150,
    "create": 300,
    "update": 250,
    "delete": 200,
}

# Цвета
BLUE = (0, 139, 139)
GREEN = (124, 252, 0)
DARK_GREEN = (34, 139, 34)
RED = (255, 0, 0)
GOLD = (255, 200, 0)
GRAY = (102, 205, 170)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
PANEL = (40, 40, 40)

SNAKE = DARK_GREEN
HEAD = GREEN
FOOD = RED
BONUS_FOOD = GOLD
GRID = GRAY
BACKGROUND = BLUE

NOTIFICATION_COLORS = {
    "success": GREEN,
    "info": WHITE,
    "error": (255, 110, 110),
}

# Частота отрисовки (тики игры идут по своему таймеру)
FPS = 60

# Сколько секунд показывается уведомление
NOTIFICATION_TTL = 2.0
