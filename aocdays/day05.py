"""Print queue: page ordering rules and the updates that follow them."""


def parse(text):
    """Return the ordering rules as (before, after) pairs and the updates as page lists."""
    rules = []
    updates = []
    for line in text.splitlines():
        if "|" in line:
            before, after = line.split("|", 1)
            rules.append((int(before.strip()), int(after.strip())))
        elif "," in line:
            updates.append([int(page.strip()) for page in line.split(",")])
    return rules, updates


def middle_if_ordered(rules, update):
    """Middle page of the update if every neighbouring pair is covered by a rule, else None."""
    allowed = set(rules)
    if all(pair in allowed for pair in zip(update, update[1:])):
        return update[len(update) // 2]
    return None


def reorder(rules, update):
    """Return a copy of the update with pages swapped wherever a rule demands it."""
    pages = list(update)
    for i in range(len(pages) - 1):
        for j in range(i + 1, len(pages)):
            for before, after in rules:
                if before == pages[j] and after == pages[i]:
                    pages[i], pages[j] = pages[j], pages[i]
    return pages


def part1(text):
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse(text)
    return sum(
        middle
        for middle in (middle_if_ordered(rules, update) for update in updates)
        if middle is not None
    )


def part2(text):
    """Sum of middle pages of the incorrectly ordered updates after reordering."""
    rules, updates = parse(text)
    total = 0
    for update in updates:
        if middle_if_ordered(rules, update) is None:
            fixed = reorder(rules, update)
            total += fixed[len(fixed) // 2]
    return total