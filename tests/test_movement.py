from digger.commands import handlers
from digger.state.player import Player
from digger.world.dungeon import Dungeon
from digger.world.objects import GameObject
from digger.world.room import Room
from digger.world.spatial import ORIGIN, Coordinate, Direction


def test_no_exit_blocks_movement():
    player, dungeon = Player(), Dungeon.default()
    assert handlers.goto(player, dungeon, Direction.SOUTH) == "There's no exit in that direction!"
    assert player.location == ORIGIN


def test_moving_prints_the_new_room():
    player, dungeon = Player(), Dungeon.default()
    dungeon.ensure(Coordinate(0, 1, 0), lambda: Room().with_objects([GameObject.GOLD]))

    reply = handlers.goto(player, dungeon, Direction.SOUTH)

    assert player.location == Coordinate(0, 1, 0)
    assert reply == "Room at (0, 1, 0). On the floor you can see: some gold. There is one exit: north."


def test_north_needs_a_ladder_on_the_floor():
    player = Player(location=Coordinate(0, 1, 0))
    dungeon = Dungeon.default()
    dungeon.ensure(player.location, Room)

    assert handlers.goto(player, dungeon, Direction.NORTH) == "You can't go upwards without a ladder!"
    assert player.location == Coordinate(0, 1, 0)

    # A carried ladder does not count; it has to be on the floor.
    player.inventory.add(GameObject.LADDER)
    assert handlers.goto(player, dungeon, Direction.NORTH) == "You can't go upwards without a ladder!"

    dungeon.get(player.location).objects.add(GameObject.LADDER)
    reply = handlers.goto(player, dungeon, Direction.NORTH)
    assert player.location == ORIGIN
    assert reply.startswith("The room where it all started...")


def test_ladder_check_comes_before_exit_check():
    player, dungeon = Player(), Dungeon.default()
    dungeon.get(ORIGIN).objects.discard(GameObject.LADDER)
    assert handlers.goto(player, dungeon, Direction.NORTH) == "You can't go upwards without a ladder!"


def test_up_and_down_need_no_ladder():
    player, dungeon = Player(), Dungeon.default()
    dungeon.get(ORIGIN).objects.clear()
    dungeon.ensure(Coordinate(0, 0, 1), Room)
    handlers.goto(player, dungeon, Direction.DOWN)
    assert player.location == Coordinate(0, 0, 1)
    handlers.goto(player, dungeon, Direction.UP)
    assert player.location == ORIGIN
