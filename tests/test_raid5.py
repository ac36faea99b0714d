import pytest

from raidprobe.md.raid5 import Raid5Algorithm

LAYOUTS = [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("algorithm", list(Raid5Algorithm))
def test_from_layout_round_trip(algorithm):
    assert Raid5Algorithm.from_layout(algorithm.value) is algorithm


@pytest.mark.parametrize("layout", [6, 8, 16, 100])
def test_unknown_layout(layout):
    assert Raid5Algorithm.from_layout(layout) is None


def test_known_layout_number():
    assert Raid5Algorithm.from_layout(2) is Raid5Algorithm.LEFT_SYMMETRIC


@pytest.mark.parametrize("layout", LAYOUTS)
@pytest.mark.parametrize("raid_disks", [2, 3, 4, 5, 7])
def test_each_stripe_uses_every_disk_once(layout, raid_disks):
    algorithm = Raid5Algorithm.from_layout(layout)
    spc = 8
    data_disks = raid_disks - 1
    for stripe in range(raid_disks * 2):
        parities = set()
        data = []
        for index in range(data_disks):
            chunk = stripe * data_disks + index
            _, parity, disk = algorithm.compute_sector(chunk * spc + 3, spc, raid_disks)
            parities.add(parity)
            data.append(disk)
        assert len(parities) == 1
        assert sorted(data + list(parities)) == list(range(raid_disks))


@pytest.mark.parametrize("layout", LAYOUTS)
def test_device_sector_matches_chunk_offset(layout):
    algorithm = Raid5Algorithm.from_layout(layout)
    for sector in range(0, 200, 7):
        new_sector, _, _ = algorithm.compute_sector(sector, 16, 4)
        assert new_sector == sector


@pytest.mark.parametrize("raid_disks", [3, 4, 6])
def test_fixed_parity_layouts(raid_disks):
    for chunk in range(10):
        _, p0, _ = Raid5Algorithm.PARITY_0.compute_sector(chunk * 4, 4, raid_disks)
        _, pn, _ = Raid5Algorithm.PARITY_N.compute_sector(chunk * 4, 4, raid_disks)
        assert p0 == 0
        assert pn == raid_disks - 1


@pytest.mark.parametrize(
    "algorithm", [Raid5Algorithm.LEFT_ASYMMETRIC, Raid5Algorithm.LEFT_SYMMETRIC]
)
def test_left_layouts_start_parity_on_last_disk(algorithm):
    _, parity, _ = algorithm.compute_sector(0, 8, 5)
    assert parity == 5 - 1


@pytest.mark.parametrize(
    "algorithm", [Raid5Algorithm.RIGHT_ASYMMETRIC, Raid5Algorithm.RIGHT_SYMMETRIC]
)
def test_right_layouts_start_parity_on_first_disk(algorithm):
    _, parity, _ = algorithm.compute_sector(0, 8, 5)
    assert parity == 0


def test_invalid_geometry_rejected():
    with pytest.raises(ValueError):
        Raid5Algorithm.LEFT_SYMMETRIC.compute_sector(0, 8, 1)
    with pytest.raises(ValueError):
        Raid5Algorithm.LEFT_SYMMETRIC.compute_sector(0, 0, 4)