import json
import sys
from pathlib import Path

from api.services.sync_engine import generate_connection_profile


def main() -> None:
    in_path = Path(sys.argv[1])
    out_path = Path(sys.argv[2])
    swiss_data = json.loads(in_path.read_text(encoding="utf-8"))
    profile = generate_connection_profile(swiss_data)
    out_path.write_text(json.dumps(profile.model_dump(), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Wrote connection profile ({profile.score}, {profile.archetype.name}) → {out_path}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python cli.py swiss.json profile.json")
        sys.exit(1)
    main()
