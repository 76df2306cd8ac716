from ledtris_board import new_board
from ledtris_config import CONFIG, HEIGHT, LEVELS, WIDTH
from ledtris_piece import ActiveBlock
from ledtris_render import blank_frame, compose


def gradient_frame():
    return [[(x + y * WIDTH) % LEVELS for x in range(WIDTH)] for y in range(HEIGHT)]


def test_compose_overlays_block_and_keeps_board():
    board = new_board()
    board[7][0] = CONFIG["LOCKED_BRIGHTNESS"]
    block = ActiveBlock.spawn("O")
    frame = compose(board, block)
    assert frame[0][3] == frame[0][4] == CONFIG["ACTIVE_BRIGHTNESS"]
    assert frame[7][0] == CONFIG["LOCKED_BRIGHTNESS"]
    assert sum(v == CONFIG["ACTIVE_BRIGHTNESS"] for row in frame for v in row) == 2
    assert board[0] == [0] * WIDTH


def test_compose_without_block_copies_board():
    board = new_board()
    board[3][3] = 9
    frame = compose(board, None)
    assert frame == board and frame is not board
    frame[3][3] = 0
    assert board[3][3] == 9


def test_drive_lights_each_cell_for_its_brightness(driver, display):
    frame = gradient_frame()
    driver.drive(frame)
    assert display.lit == frame
    assert display.all_off()
    assert display.selected_order == list(range(HEIGHT))
    assert display.max_rows_selected == 1


def test_drive_takes_one_hold_per_sublevel(driver, clock):
    CONFIG["SUBLEVEL_HOLD_US"] = 10
    driver.drive(blank_frame())
    assert clock.us == HEIGHT * LEVELS * 10
    assert driver.passes == 1


def test_hold_drives_at_least_once(driver):
    CONFIG["SUBLEVEL_HOLD_US"] = 0
    driver.hold(blank_frame(), 0)
    assert driver.passes == 1


def test_hold_covers_the_duration(driver, clock):
    start = clock.ticks_ms()
    driver.hold(blank_frame(), 50)
    assert clock.ticks_ms() - start >= 50
    assert driver.passes > 1
