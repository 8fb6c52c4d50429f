from newsreader.pipeline import annotate_text

TEXT = "Obama visited Facebook headquarters: http://bit.ly/xyz @elversatile"
TEXT_WITH_HASHTAG = TEXT + " #usPrez"

if __name__ == "__main__":
    examples = [
        (
            "original example",
            TEXT,
            [
                {"startIndex": 14, "endIndex": 22, "type": "entity"},
                {"startIndex": 0, "endIndex": 5, "type": "entity"},
                {"startIndex": 55, "endIndex": 67, "type": "twitterUsername"},
                {"startIndex": 37, "endIndex": 54, "type": "link"},
            ],
        ),
        (
            "with hashtag",
            TEXT_WITH_HASHTAG,
            [
                {"startIndex": 14, "endIndex": 22, "type": "entity"},
                {"startIndex": 0, "endIndex": 5, "type": "entity"},
                {"startIndex": 55, "endIndex": 67, "type": "twitterUsername"},
                {"startIndex": 37, "endIndex": 54, "type": "link"},
                {"startIndex": 68, "endIndex": 76, "type": "twitterHashtag"},
            ],
        ),
        (
            "with unknown types",
            TEXT_WITH_HASHTAG,
            [
                {"startIndex": 14, "endIndex": 22, "type": "entityInvalid"},
                {"startIndex": 0, "endIndex": 5, "type": "entity"},
                {"startIndex": 55, "endIndex": 67, "type": "twitterUsernameInvalid"},
                {"startIndex": 37, "endIndex": 54, "type": "link"},
                {"startIndex": 68, "endIndex": 76, "type": "twitterHashtag"},
            ],
        ),
    ]

    for title, text, spans in examples:
        annotated, descriptors = annotate_text(text, spans)
        print(f"=== {title.upper()} ===")
        print(annotated)
        for s in descriptors:
            print(f"  {s.type} [{s.start}:{s.end}] '{text[s.start:s.end]}' -> {s.rendered!r}")
        print()
