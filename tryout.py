from linecalc.parser import Parser
from linecalc.tokenizer import Tokenizer, tokenize
from linecalc.utils import CalculatorError

for code in [
    "5",
    "1 + 1",
    "4 + 6 * 3",
    "2 ** 2 + 4 * 5",
    "2 ** 3 ** 2",
    "80225/2",
    "7/6/2000",
    "10 / 5/ 2",
    "1 / 0",
    "0 / 0",
    "1.2.3 + 1",
    "3 +",
    "+ 3",
    "2 3",
    "2 % 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except CalculatorError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")
    print(f"spans: {' '.join(f'[{t.start}, {t.end})' for t in tokens)}")

    try:
        result = Parser(Tokenizer(code), code=code).parse()
    except CalculatorError as e:
        print(e)
        continue
    print(f"result: {result}")
