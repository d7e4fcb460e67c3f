# Начальные данные хранилищ (загружаются при старте процесса)

GAME_STATES = [
    {
        "id": 1,
        "score": 0,
        "level": 1,
        "isPlaying": False,
        "isPaused": False,
        "isGameOver": False,
        "highScore": 0,
    },
]

SNAKES = [
    {
        "id": 1,
        "segments": [{"x": 10, "y": 10}],
        "direction": "right",
    },
]

FOODS = [
    {
        "id": 1,
        "x": 15,
        "y": 15,
        "type": "normal",
        "points": 10,
    },
]
