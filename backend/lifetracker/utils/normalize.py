def normalize_list_name(name: str) -> str:
    """Storage/lookup form of a list name: trimmed, lowercase."""
    return name.strip().lower()

def display_list_name(name: str) -> str:
    """Title-case each space-separated word, e.g. "grocery list" -> "Grocery List"."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))
