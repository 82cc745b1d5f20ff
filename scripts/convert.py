# Run from the repo root: python -m scripts.convert
import json
import re
from pathlib import Path

import pandas as pd

import config

EXCEL_PATH = Path(config.RAW_EXCEL_FILE)
SHEET_NAME = config.EXCEL_SHEET_NAME
TXT_PATH = Path(config.RAW_DATA_FILE)

OUT_JSON = Path(config.CHAT_DATA_FILE)

PROMPT_HEADERS = ("prompt", "question", "pattern")
RESPONSE_HEADERS = ("response", "answer")


def clean(s):
    if s is None:
        return ""
    try:
        if pd.isna(s):
            return ""
    except (TypeError, ValueError):
        pass
    return str(s).strip()


def _is_prompt_col(c):
    return any(h in c for h in PROMPT_HEADERS)


def _is_response_col(c):
    return any(h in c for h in RESPONSE_HEADERS)


def load_excel(path=EXCEL_PATH, sheet_name=SHEET_NAME):
    path = Path(path)
    if not path.exists():
        return []

    df_raw = pd.read_excel(path, sheet_name=sheet_name, header=None)

    def hclean(x):
        return clean(x).replace("\ufeff", "").lower()

    header_row_index = None
    for i in range(min(20, len(df_raw))):
        row = [hclean(x) for x in df_raw.iloc[i].tolist()]
        if any(_is_prompt_col(c) for c in row) and any(_is_response_col(c) for c in row):
            header_row_index = i
            break

    if header_row_index is None:
        raise ValueError("Header row not found. Need Prompt/Question + Response/Answer columns.")

    headers = [hclean(x) for x in df_raw.iloc[header_row_index].tolist()]
    df = df_raw.iloc[header_row_index + 1:].copy()
    df.columns = headers
    df = df.dropna(how="all").reset_index(drop=True)

    p_cols = [c for c in df.columns if _is_prompt_col(c)]
    r_cols = [c for c in df.columns if _is_response_col(c)]

    out = []
    for _, row in df.iterrows():
        prompts = [clean(row.get(c)) for c in p_cols if clean(row.get(c))]
        responses = [clean(row.get(c)) for c in r_cols if clean(row.get(c))]
        if not prompts or not responses:
            continue

        # one entry per prompt, all sharing the first response
        for p in prompts:
            out.append({"prompt": p, "response": responses[0]})

    return out


def load_txt(path=TXT_PATH):
    path = Path(path)
    if not path.exists():
        return []

    text = path.read_text(encoding="utf-8").strip()
    blocks = [b.strip() for b in re.split(r"\n\s*\n", text) if b.strip()]

    out = []
    for block in blocks:
        lines = [l.strip() for l in block.splitlines() if l.strip()]
        if len(lines) < 2:
            continue
        out.append({"prompt": lines[0], "response": " ".join(lines[1:])})
    return out


def convert(excel_path=EXCEL_PATH, txt_path=TXT_PATH, out_json=OUT_JSON):
    out_json = Path(out_json)
    out_json.parent.mkdir(parents=True, exist_ok=True)

    items = []
    items += load_excel(excel_path)
    items += load_txt(txt_path)

    out_json.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"✅ Created {out_json} with {len(items)} prompt/response entries")
    return items


def main():
    convert()


if __name__ == "__main__":
    main()
