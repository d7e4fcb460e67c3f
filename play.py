"""
Игра "Змейка" в окне pygame.

Использование:
    python play.py                      # Обычная игра
    python play.py --seed 42            # Повторяемая еда
    python play.py --failure-rate 0.3   # Сбои хранилища (проверка уведомлений)
    python play.py --no-latency         # Хранилища без задержки

Управление: стрелки/WASD - направление, SPACE - пауза,
ENTER - старт, R - сброс, ESC - выход.
"""
import argparse
import asyncio
import logging

import numpy as np
import pygame

from config import (BACKGROUND, BLACK, BONUS_FOOD, CELL_SIZE, FOOD, FPS, GRID,
                    HEAD, HEIGHT, NOTIFICATION_COLORS, PANEL, PANEL_WIDTH,
                    SNAKE, WHITE, WIDTH)
from database import GameDatabase
from food import BONUS
from game import Phase, SnakeGame
from notifications import Notifier
from persistence import PersistenceQueue, load_saved_game
from scheduler import TickScheduler

logger = logging.getLogger(__name__)

# Сколько секунд ждём незавершённые сохранения при выходе
SHUTDOWN_TIMEOUT = 2.0


class SnakePlayer:
    def __init__(self, game, notifier):
        pygame.init()

        self.game = game
        self.notifier = notifier

        self.screen = pygame.display.set_mode((WIDTH + PANEL_WIDTH, HEIGHT))
        pygame.display.set_caption('Snake')
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 32)

        self.running = True

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_RETURN:
                    self.game.start()
                elif event.key == pygame.K_r:
                    self.game.reset()
                else:
                    self.game.handle_key(pygame.key.name(event.key))

    def draw_board(self, frame):
        self.screen.fill(BACKGROUND)

        # Сетка
        for x in range(0, WIDTH, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, HEIGHT))
        for y in range(0, HEIGHT, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (0, y), (WIDTH, y))

        # Граница поля
        pygame.draw.rect(self.screen, (150, 50, 50), (0, 0, WIDTH, HEIGHT), 3)

        # Змейка
        for i, (x, y) in enumerate(frame["snake"]):
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)
            color = HEAD if i == 0 else SNAKE
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        # Еда
        food = frame["food"]
        if food:
            rect = pygame.Rect(food["x"] * CELL_SIZE, food["y"] * CELL_SIZE,
                               CELL_SIZE - 1, CELL_SIZE - 1)
            color = BONUS_FOOD if food["type"] == BONUS else FOOD
            pygame.draw.ellipse(self.screen, color, rect)

    def draw_panel(self, frame):
        panel = pygame.Rect(WIDTH, 0, PANEL_WIDTH, HEIGHT)
        pygame.draw.rect(self.screen, PANEL, panel)

        state = frame["state"]
        stats = [
            f"Score: {state['score']}",
            f"Level: {state['level']}",
            f"High score: {state['highScore']}",
            f"Length: {len(frame['snake'])}",
            f"Speed: {frame['speed']} ms",
            "",
            "Controls:",
            "Arrows/WASD Move",
            "SPACE Pause",
            "ENTER Start",
            "R Reset",
            "ESC Quit",
        ]

        for i, text in enumerate(stats):
            surf = self.font.render(text, True, WHITE)
            self.screen.blit(surf, (WIDTH + 10, 20 + i * 25))

    def draw_overlay(self, phase):
        captions = {
            Phase.IDLE: "Press ENTER to start",
            Phase.PAUSED: "PAUSED",
            Phase.GAME_OVER: "GAME OVER",
        }
        caption = captions.get(phase)
        if caption is None:
            return
        surf = self.big_font.render(caption, True, WHITE)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

    def draw_notifications(self):
        for i, note in enumerate(reversed(self.notifier.recent())):
            color = NOTIFICATION_COLORS.get(note.level, WHITE)
            surf = self.font.render(note.text, True, color)
            self.screen.blit(surf, (10, 10 + i * 22))

    def draw(self):
        frame = self.game.snapshot()
        self.draw_board(frame)
        self.draw_panel(frame)
        self.draw_overlay(self.game.phase)
        self.draw_notifications()
        pygame.display.flip()

    async def play(self):
        while self.running:
            self.handle_events()
            self.draw()
            # Ждём кадр, отдавая управление таймеру игры и воркеру сохранений
            await asyncio.sleep(1 / FPS)

        pygame.quit()


async def main(args):
    rng = np.random.default_rng(args.seed)
    database = GameDatabase(latency=0 if args.no_latency else None,
                            failure_rate=args.failure_rate, rng=rng)
    notifier = Notifier()
    persistence = PersistenceQueue(database, notifier)

    game = SnakeGame(persistence=persistence, notifier=notifier, rng=rng)
    game.bind_scheduler(TickScheduler(game.tick))

    game_record, snake_record, food_record = await load_saved_game(database, notifier)
    game.restore(game_record, snake_record, food_record)
    logger.info("Saved game loaded: high score %d", game.state.high_score)

    worker = asyncio.create_task(persistence.run())
    player = SnakePlayer(game, notifier)
    try:
        await player.play()
    finally:
        game.scheduler.cancel()
        # Дописываем то, что успели поставить в очередь перед выходом
        await persistence.flush(SHUTDOWN_TIMEOUT)
        worker.cancel()
        database.close()

    print(f"\nResults: {game.games} games")
    print(f"Best: {game.state.high_score}")
    print(f"Saved OK: {persistence.completed}, failed: {persistence.failed}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Snake arcade game")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and store failures")
    parser.add_argument("--failure-rate", type=float, default=0.0,
                        help="Probability of a simulated store failure per call")
    parser.add_argument("--no-latency", action="store_true",
                        help="Disable simulated store latency")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(main(args))
