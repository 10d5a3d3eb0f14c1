class MathError(Exception):
    kind = "unknown"

    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    def describe(self):
        """Short text for the code, as shown by the presentation layer."""
        return f"Error {self.code}: {ERROR_MESSAGES.get(self.code, 'Unknown error')}"

class LexicalError(MathError):
    kind = "lexical"

class SyntaxError(MathError):
    kind = "syntax"

class CalculationError(MathError):
    kind = "arithmetic"

class ConfigurationError(MathError):
    kind = "configuration"


class PutbackError(RuntimeError):
    """A second token was pushed back while the buffer was still full."""
    pass



Error_Dictionary= {

    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3008" : "Malformed number.",
    "3009" : "Missing ')'.",
    "3011" : "Primary expected.",
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3031" : "Bad token.",
    "3032" : "Modulo by Zero",
    "3034" : "Unexpected token after expression.",
    "3035" : "Expression nested too deeply.",


    "5001" : "Invalid setting value.",


    "9999" : "Unexpected Error."
}
