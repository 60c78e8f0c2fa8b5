import json, hashlib

def canon_row(row: dict, keys: list[str]) -> dict:
    out = {}
    for k in keys:
        v = row.get(k) or ""
        if isinstance(v, str):
            v = v.replace("\r\n","\n").replace("\r","\n").strip()
        out[k] = v
    return out

def row_hash(row: dict, keys: list[str]) -> str:
    s = json.dumps(canon_row(row, keys), ensure_ascii=False, sort_keys=True)
    return hashlib.sha256(s.encode("utf-8")).hexdigest()

def record_key(row: dict) -> str:
    company = row.get("company_sponsor_name") or row.get("company_name") or ""
    parts = [row.get("medicinal_ingredients") or "", company, row.get("year_month_accepted") or ""]
    return "|".join(p.strip().lower() for p in parts)
