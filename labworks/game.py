"""Pooled ice cubes that melt away over a number of frames."""

from __future__ import annotations

from collections import deque
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

MAX_FRAME_COUNT_TO_LIVE = 100

_NUMBERS: tuple[tuple[int, ...], ...] = (
    (32391, 14604, 3902, 153, 292, 12382, 17421, 18716, 19718, 19895,
     5447, 21726, 14771, 11538, 1869, 19912, 25667, 26299, 17035, 9894),
    (41, 18467, 6334, 26500, 19169, 15724, 11478, 29358, 26962, 24464,
     5705, 28145, 23281, 16827, 9961, 491, 2995, 11942, 4827, 5436),
    (28703, 23811, 31322, 30333, 17673, 4664, 15141, 7711, 28253, 6868,
     25547, 27644, 32662, 32757, 20037, 12859, 8723, 9741, 27529, 778),
    (12316, 3035, 22190, 1842, 288, 30106, 9040, 8942, 19264, 22648,
     27446, 23805, 15890, 6729, 24370, 15350, 15006, 31101, 24393, 3548),
    (19629, 12623, 24084, 19954, 18756, 11840, 4966, 7376, 13931, 26308,
     16944, 32439, 24626, 11323, 5537, 21538, 16118, 2082, 22929, 16541),
    (4833, 31115, 4639, 29658, 22704, 9930, 13977, 2306, 31673, 22386,
     5021, 28745, 26924, 19072, 6270, 5829, 26777, 15573, 5097, 16512),
    (23986, 13290, 9161, 18636, 22355, 24767, 23655, 15574, 4031, 12052,
     27350, 1150, 16941, 21724, 13966, 3430, 31107, 30191, 18007, 11337),
    (15457, 12287, 27753, 10383, 14945, 8909, 32209, 9758, 24221, 18588,
     6422, 24946, 27506, 13030, 16413, 29168, 900, 32591, 18762, 1655),
    (17410, 6359, 27624, 20537, 21548, 6483, 27595, 4041, 3602, 24350,
     10291, 30836, 9374, 11020, 4596, 24021, 27348, 23199, 19668, 24484),
    (8281, 4734, 53, 1999, 26418, 27938, 6900, 3788, 18127, 467,
     3728, 14893, 24648, 22483, 17807, 2421, 14310, 6617, 22813, 9514),
)


class IceCube:
    """A game object that stays active for a number of frames."""

    def __init__(self) -> None:
        self._frame_count_to_live = 0

    @property
    def frame_count_to_live(self) -> int:
        """Frames left before the cube melts."""
        return self._frame_count_to_live

    def initialize(self, frame_count_to_live: int) -> None:
        """Give the cube frame_count_to_live frames to live."""
        if frame_count_to_live < 0:
            raise ValueError("frame count must not be negative")
        self._frame_count_to_live = frame_count_to_live

    def reset(self) -> None:
        """Melt the cube at once."""
        self._frame_count_to_live = 0

    def animate(self) -> None:
        """Advance one frame."""
        if self._frame_count_to_live > 0:
            self._frame_count_to_live -= 1

    def is_active(self) -> bool:
        """True while the cube has frames left."""
        return self._frame_count_to_live > 0


class ObjectPool(Generic[T]):
    """A first-in first-out pool of reusable objects with a size limit."""

    def __init__(self, factory: Callable[[], T], max_pool_size: int) -> None:
        if max_pool_size < 0:
            raise ValueError("pool size must not be negative")
        self._factory = factory
        self._max_pool_size = max_pool_size
        self._free: deque[T] = deque()

    @property
    def free_count(self) -> int:
        """Number of objects waiting in the pool."""
        return len(self._free)

    @property
    def max_free_count(self) -> int:
        """The largest number of objects the pool keeps."""
        return self._max_pool_size

    def get(self) -> T:
        """Take the oldest pooled object, or make a new one if the pool is empty."""
        if not self._free:
            return self._factory()
        return self._free.popleft()

    def put(self, item: T) -> None:
        """Return item to the pool; it is dropped when the pool is full."""
        if len(self._free) >= self._max_pool_size:
            return
        self._free.append(item)


class TableRandom:
    """Deterministic numbers read from a fixed table row chosen by the seed."""

    ROW_SIZE = len(_NUMBERS)
    COLUMN_SIZE = len(_NUMBERS[0])

    def __init__(self, seed: int) -> None:
        if seed < 0:
            raise ValueError("seed must not be negative")
        self._row = _NUMBERS[seed % self.ROW_SIZE]
        self._index = 0

    def next(self) -> int:
        """Return the next number of the row, wrapping around at its end."""
        value = self._row[self._index % self.COLUMN_SIZE]
        self._index += 1
        return value

    def __iter__(self) -> TableRandom:
        return self

    def __next__(self) -> int:
        return self.next()


class Game:
    """Spawns ice cubes from a pool and returns them when they melt."""

    def __init__(self, seed: int, pool_size: int) -> None:
        self._random = TableRandom(seed)
        self._pool: ObjectPool[IceCube] = ObjectPool(IceCube, pool_size)
        self._active: list[IceCube] = []

    @property
    def active_objects(self) -> tuple[IceCube, ...]:
        """The cubes currently in play, in spawn order."""
        return tuple(self._active)

    @property
    def object_pool(self) -> ObjectPool[IceCube]:
        """The pool the cubes come from."""
        return self._pool

    def spawn(self) -> IceCube:
        """Bring a cube into play with a random lifetime of 1 to 100 frames."""
        cube = self._pool.get()
        cube.initialize(self._random.next() % MAX_FRAME_COUNT_TO_LIVE + 1)
        self._active.append(cube)
        return cube

    def update(self) -> None:
        """Animate every cube and return the melted ones to the pool."""
        still_active: list[IceCube] = []
        for cube in self._active:
            cube.animate()
            if cube.is_active():
                still_active.append(cube)
            else:
                self._pool.put(cube)
        self._active = still_active