"""
Transcript from URL example.

Demonstrates building a transcript from captions served over HTTP.
"""

from podvtt import TranscriptConfig, transcript_from_config

def main():
    config = TranscriptConfig(
        source="https://example.com/captions/episode-1.vtt",
        output_file="/tmp/podvtt/episode-1.txt",
        timeout=30,
    )

    result = transcript_from_config(config)

    print(f"Parsed {result['captions_count']} captions")
    print(f"Wrote {result['lines_count']} lines to {result['output_file']}")

if __name__ == "__main__":
    main()
