# Main.py
""""" Terminal entry point for the expression calculator.

   Responsibilities:
   - Load configuration and set up logging
   - Hand each entered line to the MathEngine and print the result or the error
   - Optionally copy results to the clipboard

"""""
import sys
import logging
import pyperclip
from calculator import config_manager as config_manager, MathEngine as MathEngine
from calculator import error as E

logger = logging.getLogger("calculator.main")


def copy_to_clipboard(text):
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Could not copy result to clipboard: %s", e)


def run_problem(problem, settings):
    """
    Evaluate one line and return (ok, text to show).
    The engine knows nothing about ';', the caller appends it like the original calculator window did.
    """
    try:
        result = MathEngine.evaluate(problem + MathEngine.PRINT, settings)
    except E.ConfigurationError as e:
        return False, f"{e.describe()}\nDetails: {e.message}"

    if not result.ok:
        error_obj = result.error
        return False, f"{error_obj.describe()}\nDetails: {error_obj.message}\nEquation: {problem}"

    ausgabe_string = MathEngine.format_result(result.value)
    if settings.get("copy_result_to_clipboard"):
        copy_to_clipboard(ausgabe_string)
    return True, "= " + ausgabe_string


def main(argv=None):

    """
    Load configuration and start the prompt loop.
    - Keep this thin: no business logic here.
    """

    if argv is None:
        argv = sys.argv[1:]

    all_settings = config_manager.load_setting_value("all")
    logging.basicConfig(
        level=logging.DEBUG if all_settings.get("debug") else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Config loaded: %s", all_settings)

    # One-shot mode: every argument is its own problem
    if argv:
        failed = False
        for problem in argv:
            ok, output = run_problem(problem, all_settings)
            failed = failed or not ok
            print(output)
        return 1 if failed else 0

    while True:
        try:
            problem = input("Command: ")
        except EOFError:
            break
        if problem.strip() in ("", "q"):
            break
        print(run_problem(problem, all_settings)[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())
