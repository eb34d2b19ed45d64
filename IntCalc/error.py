class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class CalculationError(MathError):
    pass

class DivisionByZero(CalculationError):
    def __init__(self, message="Division by zero", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)

class NumberTooBig(CalculationError):
    def __init__(self, message="Number too big", code="3026", equation=None):
        super().__init__(message, code=code, equation=equation)

class MalformedExpression(MathError):
    def __init__(self, message="Malformed expression", code="3011", equation=None):
        super().__init__(message, code=code, equation=equation)



Error_Dictionary = {

    "1" : "Missing Files",
    "3" : "Calculator Error",
    "4" : "UI Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1000" : "Required file missing: ", # + file name

    "3003" : "Division by Zero",
    "3011" : "Unexpected Token: ", # + Token
    "3026" : "Number too big.",

    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "9999" : "Unexpected Error: " #+error
}


def describe(error):
    """Return the dialog headline for a MathError, e.g. 'Error 3003: Division by Zero'."""
    category = Error_Dictionary.get(error.code[:1], "Unknown Error")
    text = ERROR_MESSAGES.get(error.code, "Unknown error")
    return f"{category} {error.code}: {text}"
