"""Solutions to Advent of Code 2021 puzzles, days 1 to 16 and 18."""