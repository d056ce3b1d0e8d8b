"""
gametick-progress Sandbox
Interactive demo of ActionTracker: start skilling sequences, interrupt them,
toggle the fletching knife, and watch the estimate count down.
"""

import sys

import pygame

from gametick import Engine, setup_logging
from gametick_signal import InterruptManager, SignalBus, make_signal_system
from gametick_progress import (
    ACTION_STARTED,
    ACTION_STOPPED,
    FLETCHING_KNIFE,
    ActionKind,
    ActionTracker,
    InventoryID,
    ItemContainers,
    ProgressConfig,
    attach_tracker,
    make_progress_system,
)

# --- Configuration ---
WIDTH, HEIGHT = 720, 320
FPS = 60
TITLE = "gametick-progress Sandbox"

BAR_RECT = pygame.Rect(40, 140, WIDTH - 80, 36)

# Colors
BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
BAR_BG = (60, 60, 80)
BAR_FILL = (0, 200, 120)
OUTLINE_COLOR = (255, 255, 255)

# key -> (kind, count, product id)
SEQUENCES = {
    pygame.K_1: (ActionKind.COOKING, 28, 315),
    pygame.K_2: (ActionKind.FLETCH_CUT_BOW, 27, 50),
    pygame.K_3: (ActionKind.FLETCH_CUT_ARROW_SHAFT, 10, 52),
    pygame.K_4: (ActionKind.SMITHING, 27, 2353),
    pygame.K_5: (ActionKind.SMITHING_WITH_SMITH_OUTFIT, 27, 2353),
    pygame.K_6: (ActionKind.HERBLORE_MIX_POTION, 14, 113),
}


def main():
    setup_logging("DEBUG")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # --- Engine setup ---
    engine = Engine()
    bus = SignalBus()
    interrupts = InterruptManager(bus)
    inventory = ItemContainers()
    inventory.set_items(InventoryID.INVENTORY, [])
    inventory.set_items(InventoryID.EQUIPMENT, [])
    tracker = ActionTracker(engine.clock, interrupts, ProgressConfig(), inventory, bus)
    attach_tracker(bus, tracker)

    engine.add_system(make_signal_system(bus))
    engine.add_system(make_progress_system(tracker))

    history: list[str] = []

    def on_started(signal_name, data):
        evt = data["event"]
        history.append(f"started {evt.count} x {evt.kind.name} ({evt.start_tick} -> {evt.end_tick})")

    def on_stopped(signal_name, data):
        evt = data["event"]
        early = "early" if evt.completed else "on time"
        history.append(f"stopped {evt.kind.name} at tick {engine.clock.tick_number} ({early})")

    bus.subscribe(ACTION_STARTED, on_started)
    bus.subscribe(ACTION_STOPPED, on_stopped)

    # --- State ---
    paused = False
    running = True
    next_tick_at = pygame.time.get_ticks() + engine.clock.tick_ms

    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_i:
                    interrupts.interrupt("player moved")
                elif event.key == pygame.K_k:
                    if inventory.contains(InventoryID.INVENTORY, FLETCHING_KNIFE):
                        inventory.remove(InventoryID.INVENTORY, FLETCHING_KNIFE)
                    else:
                        inventory.add(InventoryID.INVENTORY, FLETCHING_KNIFE)
                elif event.key in SEQUENCES:
                    kind, count, product_id = SEQUENCES[event.key]
                    tracker.start_action(kind, count, product_id)

        # --- Update ---
        now = pygame.time.get_ticks()
        if not paused and now >= next_tick_at:
            engine.step()
            next_tick_at = now + engine.clock.tick_ms

        # --- Draw ---
        screen.fill(BG_COLOR)
        pygame.draw.rect(screen, BAR_BG, BAR_RECT)

        if tracker.is_active():
            total = tracker.action_end_tick - tracker.action_start_tick
            elapsed = engine.clock.tick_number - tracker.action_start_tick
            fraction = min(1.0, elapsed / total) if total > 0 else 1.0
            fill = BAR_RECT.copy()
            fill.width = int(BAR_RECT.width * fraction)
            pygame.draw.rect(screen, BAR_FILL, fill)
            label = (
                f"{tracker.current_action.name}: {tracker.current_action_processed()}"
                f"/{tracker.action_count}   {tracker.approximate_completion_ms() / 1000:.1f}s left"
            )
        else:
            label = "idle"
        pygame.draw.rect(screen, OUTLINE_COLOR, BAR_RECT, 1)
        screen.blit(font.render(label, True, HUD_COLOR), (BAR_RECT.x, BAR_RECT.y - 22))

        # --- HUD ---
        knife_str = "ON" if inventory.contains(InventoryID.INVENTORY, FLETCHING_KNIFE) else "OFF"
        pause_str = "  [PAUSED]" if paused else ""
        hud_lines = [
            f"Tick: {engine.clock.tick_number}   Knife: {knife_str}{pause_str}",
            "1-6=Start  I=Interrupt  K=Knife  Space=Pause  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 20))

        for i, line in enumerate(history[-5:]):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, BAR_RECT.bottom + 20 + i * 18))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
