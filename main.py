import json
import sys

from quickfix.core.config import Settings
from quickfix.core.errors import QuickFixError
from quickfix.fixes.adapter import generate_fix, require_upstream_credential


async def main(question: str) -> int:
    settings = Settings()
    try:
        require_upstream_credential(settings)
    except QuickFixError as exc:
        print(f"HTTP {exc.status_code}")
        print(json.dumps(exc.to_error(), indent=2))
        return 1

    status_code, payload = await generate_fix(question, settings)
    print(f"HTTP {status_code}")
    print(json.dumps(payload, indent=2))
    return 0 if status_code == 200 else 1

if __name__ == "__main__":
    import asyncio
    sys.exit(asyncio.run(main(" ".join(sys.argv[1:]) or "How can I make pasta?")))
