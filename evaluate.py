import time

import pandas as pd
from tqdm import tqdm

import config
from responder.corpus import CorpusStore, load_corpus
from responder.matcher import IntentMatcher

# Configuration
TEST_DATA_PATH = config.TEST_DATA_FILE  # Must have 'prompt' and 'response' columns
REPORT_PATH = config.REPORT_FILE


def evaluate(test_data_path=TEST_DATA_PATH, corpus_path=config.CHAT_DATA_FILE, report_path=REPORT_PATH):
    # 1. Check for Test Data
    try:
        df = pd.read_csv(test_data_path)
    except FileNotFoundError:
        print(f"❌ Error: Could not find {test_data_path}")
        print("   Please create a CSV with two columns: prompt, response")
        return None

    df.columns = df.columns.str.lower()
    if "prompt" not in df.columns or "response" not in df.columns:
        print(f"❌ Error: {test_data_path} must have 'prompt' and 'response' columns.")
        return None

    if len(df) == 0:
        print(f"❌ Error: {test_data_path} has no rows.")
        return None

    # 2. Load the matcher
    print("⏳ Loading corpus...")
    matcher = IntentMatcher(CorpusStore(load_corpus(corpus_path)), threshold=config.MATCH_THRESHOLD)

    print(f"\n🚀 Starting Evaluation on {len(df)} prompts...\n")

    results = []
    correct_count = 0
    total_time = 0.0

    # 3. Run the Loop
    for _, row in tqdm(df.iterrows(), total=len(df)):
        prompt = str(row["prompt"])
        expected = str(row["response"])

        start_ts = time.time()
        entry, score = matcher.match(prompt)
        duration = time.time() - start_ts
        total_time += duration

        if entry is None:
            status = "REJECTED"
            got = ""
        elif entry.response == expected:
            status = "PASS"
            got = entry.response
            correct_count += 1
        else:
            status = "FAIL"
            got = entry.response

        results.append({
            "prompt": prompt,
            "expected_response": expected,
            "bot_response": got,
            "matched_prompt": entry.prompt if entry else "",
            "status": status,
            "score": round(score, 3),
            "latency_sec": round(duration, 5),
        })

    # 4. Calculate Final Statistics
    accuracy = (correct_count / len(df)) * 100
    avg_latency = total_time / len(df)

    print("\n" + "=" * 30)
    print("📊 EVALUATION SUMMARY")
    print("=" * 30)
    print(f"Total Prompts:   {len(df)}")
    print(f"Correct Answers: {correct_count}")
    print(f"Accuracy:        {accuracy:.2f}%")
    print(f"Avg Latency:     {avg_latency:.5f} sec/query")
    print("=" * 30)

    # 5. Save Report
    results_df = pd.DataFrame(results)
    results_df.to_csv(report_path, index=False)
    print(f"\n✅ Detailed report saved to: {report_path}")
    return {"total": len(df), "correct": correct_count, "accuracy": accuracy}


if __name__ == "__main__":
    evaluate()
