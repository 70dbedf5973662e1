from pprint import pprint


def print_result(label, value):
    print(f"{label}:")
    pprint(value, sort_dicts=False)


def print_count(label, count, noun="document"):
    print(f"{label} -> {count} {noun}(s)")
