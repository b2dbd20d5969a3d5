"""Tests for the snake module."""

from snake_board.snake import Direction, Position, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT

    def test_opposite_is_involution(self):
        for direction in Direction:
            assert direction.opposite().opposite() == direction


class TestPosition:
    def test_translate(self):
        pos = Position(5, 5)
        assert pos.translate(Direction.UP) == Position(4, 5)
        assert pos.translate(Direction.DOWN) == Position(6, 5)
        assert pos.translate(Direction.LEFT) == Position(5, 4)
        assert pos.translate(Direction.RIGHT) == Position(5, 6)

    def test_structural_equality(self):
        assert Position(2, 3) == Position(2, 3)
        assert Position(2, 3) == (2, 3)
        assert Position(2, 3) != Position(3, 2)


class TestSnake:
    def test_empty_by_default(self):
        assert len(Snake()) == 0

    def test_segments_are_head_first(self):
        snake = Snake([(5, 3), (5, 2), (5, 1)])
        assert snake.head == Position(5, 3)
        assert snake.tail == Position(5, 1)
        assert list(snake) == [Position(5, 3), Position(5, 2), Position(5, 1)]

    def test_add_head(self):
        snake = Snake([(5, 3), (5, 2)])
        snake.add_head(Position(5, 4))
        assert snake.head == Position(5, 4)
        assert len(snake) == 3

    def test_remove_tail(self):
        snake = Snake([(5, 3), (5, 2)])
        vacated = snake.remove_tail()
        assert vacated == Position(5, 2)
        assert snake.head == snake.tail == Position(5, 3)

    def test_contains(self):
        snake = Snake([(5, 3), (5, 2)])
        assert Position(5, 2) in snake
        assert Position(0, 0) not in snake

    def test_to_dict(self):
        snake = Snake([(5, 5), (5, 4)])
        assert snake.to_dict() == {"body": [[5, 5], [5, 4]]}
