"""Disk fragmenter: compact a disk map and compute its checksum."""

_FREE = -1
_DIGITS = "0123456789"


def _digits(text):
    for char in text:
        if char not in _DIGITS:
            raise ValueError(f"invalid digit {char!r}")
        yield int(char)


def _expand(text):
    disk = []
    for index, length in enumerate(_digits(text.strip())):
        block = index // 2 if index % 2 == 0 else _FREE
        disk.extend([block] * length)
    return disk


def part1(text):
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    disk = _expand(text)
    gaps = [index for index, block in enumerate(disk) if block == _FREE]
    for gap in gaps:
        while disk and disk[-1] == _FREE:
            disk.pop()
        if len(disk) <= gap:
            break
        disk[gap] = disk.pop()
    return sum(index * block for index, block in enumerate(disk))


def _parse_files(text):
    files = {}
    free = []
    position = 0
    for index, length in enumerate(_digits(text)):
        if index % 2 == 0:
            if length == 0:
                raise ValueError("file size cannot be 0")
            files[index // 2] = (position, length)
        elif length:
            free.append((position, length))
        position += length
    return files, free


def part2(text):
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    files, free = _parse_files(text.strip())
    for file_id in sorted(files, reverse=True):
        position, size = files[file_id]
        for index, (free_position, free_size) in enumerate(free):
            if free_position >= position:
                del free[index:]
                break
            if size <= free_size:
                files[file_id] = (free_position, size)
                if size == free_size:
                    del free[index]
                else:
                    free[index] = (free_position + size, free_size - size)
                break
    return sum(
        file_id * block
        for file_id, (position, size) in files.items()
        for block in range(position, position + size)
    )