from getpass import getpass

from passgen.charsets import CANONICAL_ORDER
from passgen.config import MAX_UI_LENGTH, MIN_UI_LENGTH, GenerationConfig, Settings
from passgen.enhance import EnhancementClient
from passgen.errors import EnhancementError, InvalidConfig
from passgen.log import configure_logging
from passgen.password_utils import assess, generate, generate_many, score_enhancement


def show_menu(config: GenerationConfig):
    classes = ", ".join(c.value for c in config.ordered_classes()) or "(none)"
    print("\n=== PASSWORD GENERATOR ===")
    print(f"Length: {config.length} | Classes: {classes}")
    print("1. Generate password")
    print("2. Set length")
    print("3. Toggle character class")
    print("4. Generate several passwords")
    print("5. Show strength of current settings")
    print("6. Enhance a password (AI)")
    print("7. Exit")


def print_strength(config: GenerationConfig):
    result = assess(config)
    print(f"Strength: {result.label} (score {result.score}/100)")


def ask_int(prompt: str, default: int) -> int:
    raw = input(prompt).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print("Invalid number, using the default.")
        return default


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    config = GenerationConfig()
    client = EnhancementClient(settings)

    try:
        while True:
            show_menu(config)
            choice = input("Choose an option: ").strip()

            if choice == "1":
                try:
                    pwd = generate(config)
                except InvalidConfig as e:
                    print(f"Cannot generate: {e}")
                    continue
                print(f"\nPassword: {pwd}")
                print_strength(config)

            elif choice == "2":
                length = ask_int(f"Length ({MIN_UI_LENGTH}-{MAX_UI_LENGTH}, default {config.length}): ", config.length)
                if not MIN_UI_LENGTH <= length <= MAX_UI_LENGTH:
                    print(f"Length must be between {MIN_UI_LENGTH} and {MAX_UI_LENGTH}.")
                    continue
                config = config.with_length(length)

            elif choice == "3":
                for i, cls in enumerate(CANONICAL_ORDER, start=1):
                    mark = "x" if cls in config.enabled_classes else " "
                    print(f"  {i}. [{mark}] {cls.value}")
                idx = ask_int("Class to toggle: ", 0)
                if not 1 <= idx <= len(CANONICAL_ORDER):
                    print("Invalid option.")
                    continue
                config = config.toggled(CANONICAL_ORDER[idx - 1])
                if not config.enabled_classes:
                    print("Warning: no character class selected, generation is disabled.")

            elif choice == "4":
                count = ask_int("How many (default 5): ", 5)
                try:
                    for pwd in generate_many(config, count):
                        print(pwd)
                except InvalidConfig as e:
                    print(f"Cannot generate: {e}")

            elif choice == "5":
                print_strength(config)

            elif choice == "6":
                pwd = getpass("Password to enhance: ")
                try:
                    result = client.enhance(pwd)
                except EnhancementError as e:
                    print(f"AI enhancement failed: {e}")
                    continue
                print(f"\nEnhanced password: {result.enhanced_password}")
                print(f"Strength: {score_enhancement(result.strength_score)}/100")
                print(f"Why: {result.explanation}")

            elif choice == "7":
                print("Bye")
                break

            else:
                print("Invalid option.")
    finally:
        client.close()


if __name__ == "__main__":
    main()
