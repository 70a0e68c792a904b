"""Array and number puzzles: searching, counting, partitioning and combining."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator, Sequence

_NEIGHBOURS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair adding up to ``target``, or []."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell."""
    if not prices:
        raise ValueError("no prices given")
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        current = price - lowest
        if current < 0:
            lowest = price
        elif current > profit:
            profit = current
    return profit


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority candidate found by a single voting pass."""
    count = 0
    candidate = 0
    for num in nums:
        if num == candidate:
            count += 1
        elif count == 0:
            candidate = num
            count = 1
        else:
            count -= 1
    return candidate


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n``; negative numbers give a negated count."""
    count = bin(abs(n)).count("1")
    return -count if n < 0 else count


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place and return the number of kept values."""
    kept = 1
    for value in nums[1:]:
        if value != nums[kept - 1]:
            nums[kept] = value
            kept += 1
    return kept


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the next greater value after it in ``nums2``."""
    index_of = {value: index for index, value in enumerate(nums1)}
    greater = [-1] * len(nums1)
    stack: list[int] = []
    for value in nums2:
        while stack and stack[-1] < value:
            greater[index_of[stack.pop()]] = value
        if value in index_of:
            stack.append(value)
    return greater


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the region around (sr, sc) recoloured."""
    rows = len(image)
    cols = len(image[0]) if rows else 0
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError("start pixel outside the image")

    original = image[sr][sc]
    flooded = [list(row) for row in image]
    visited: set[tuple[int, int]] = set()
    queue: deque[tuple[int, int]] = deque([(sr, sc)])
    while queue:
        x, y = queue.popleft()
        flooded[x][y] = color
        visited.add((x, y))
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and (nx, ny) not in visited
                and flooded[nx][ny] == original
            ):
                queue.append((nx, ny))
    return flooded


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area between two of the given walls."""
    if not height:
        raise ValueError("no walls given")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    if not nums:
        return 0
    ordered = sorted(nums)
    longest = 1
    current = 1
    for previous, value in zip(ordered, ordered[1:]):
        if value == previous:
            continue
        if value == previous + 1:
            current += 1
            continue
        longest = max(longest, current)
        current = 1
    return max(longest, current)


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct triplets summing to zero, in ascending order."""
    ordered = sorted(nums)
    if len(ordered) < 2:
        raise ValueError("at least two numbers are needed")

    triplets: list[list[int]] = []
    last = len(ordered) - 1
    for n in range(len(ordered) - 2):
        if n and ordered[n] == ordered[n - 1]:
            continue
        goal = -ordered[n]
        i, j = n + 1, last
        while i < j:
            pair = ordered[i] + ordered[j]
            if pair < goal:
                i += 1
                continue
            if pair == goal:
                triplets.append([ordered[n], ordered[i], ordered[j]])
            j -= 1
            while i < j and ordered[j] == ordered[j + 1]:
                j -= 1
    return triplets


def find_min(nums: Sequence[int]) -> int:
    """Return the minimum of a rotated sorted sequence."""
    if not nums:
        raise ValueError("no numbers given")
    lowest = nums[0]
    left, right = 0, len(nums) - 1
    while left <= right:
        if nums[left] < nums[right]:
            lowest = min(lowest, nums[left])
            break
        middle = (left + right) // 2
        lowest = min(lowest, nums[middle])
        if nums[left] <= nums[middle]:
            left = middle + 1
        else:
            right = middle - 1
    return lowest


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other value."""
    answers = [1] * len(nums)
    carried = 1
    for index, value in enumerate(nums):
        answers[index] *= carried
        carried *= value
    carried = 1
    for index in reversed(range(len(nums))):
        answers[index] *= carried
        carried *= nums[index]
    return answers


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        if nums[middle] == target:
            return middle
        if nums[left] <= nums[middle]:
            if nums[middle] < target or nums[left] > target:
                left = middle + 1
            else:
                right = middle - 1
        elif nums[middle] > target or nums[right] < target:
            right = middle - 1
        else:
            left = middle + 1
    return -1


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first."""
    ranked = sorted(Counter(nums).items(), key=lambda item: -item[1])
    chosen = ranked if k < 0 else ranked[:k]
    return [value for value, _ in chosen]


def _permutations(prefix: list[int], remaining: list[int]) -> Iterator[list[int]]:
    if not remaining:
        yield prefix
        return
    for value in remaining:
        rest = list(remaining)
        rest.remove(value)
        yield from _permutations(prefix + [value], rest)


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, in lexicographic order of positions."""
    return list(_permutations([], list(nums)))


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    left = 0
    right = len(nums) - 1
    i = 0
    while right >= 0 and i <= right:
        value = nums[i]
        if value == 0:
            nums[i], nums[left] = nums[left], nums[i]
            left += 1
            i += 1
        elif value == 2:
            nums[i], nums[right] = nums[right], nums[i]
            right -= 1
        else:
            i += 1