"""
Basic podvtt usage example.

Demonstrates parsing a VTT file and saving its transcript.
"""

from podvtt import TranscriptBuilder, VTTParseError

def main():
    builder = TranscriptBuilder()

    print("Building transcript...")
    try:
        lines = builder.build(
            "captions/episode-1.vtt",
            output_file="transcripts/episode-1.txt"
        )
    except FileNotFoundError as e:
        print(e)
        return
    except VTTParseError as e:
        print(f"Invalid captions: {e}")
        return

    print(f"Rendered {len(lines)} transcript lines")
    for line in lines[:5]:
        print(line)

if __name__ == "__main__":
    main()
