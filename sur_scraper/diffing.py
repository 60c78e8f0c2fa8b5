from .normalize import canon_row, record_key, row_hash

def compute_diff(new_rows: list[dict], baseline_rows: list[dict], keys: list[str]):
    """
    Compare two snapshots of wire rows. Rows are matched on ingredient +
    company + acceptance month; a duplicate key keeps its last row.
    """
    new_by_key = {record_key(r): canon_row(r, keys) for r in new_rows if r.get("medicinal_ingredients")}
    base_by_key = {record_key(r): canon_row(r, keys) for r in baseline_rows if r.get("medicinal_ingredients")}
    added, removed, modified = [], [], []

    for key, nr in new_by_key.items():
        br = base_by_key.get(key)
        if br is None:
            added.append({"key": key, "after": nr})
        elif row_hash(nr, keys) != row_hash(br, keys):
            modified.append({"key": key, "before": br, "after": nr})

    for key, br in base_by_key.items():
        if key not in new_by_key:
            removed.append({"key": key, "before": br})

    return added, removed, modified
