from seeschlacht.part import Part


def test_new_part_keeps_position_and_is_intact():
    part = Part(3, 7)
    assert (part.row, part.col) == (3, 7)
    assert part.damaged is False


def test_set_damaged_marks_part():
    part = Part(0, 0)
    part.set_damaged()
    assert part.damaged is True


def test_set_damaged_is_idempotent():
    part = Part(5, 5)
    part.set_damaged()
    part.set_damaged()
    assert part.damaged is True
    assert (part.row, part.col) == (5, 5)


def test_damage_does_not_leak_between_parts():
    first = Part(1, 1)
    second = Part(1, 2)
    first.set_damaged()
    assert first.damaged is True
    assert second.damaged is False