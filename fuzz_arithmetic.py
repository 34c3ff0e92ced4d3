import math
import random
import re
import string
import warnings

import numpy as np

from linecalc.parser import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return float(evaluate(code))
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # powers fold left here and right in python

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"(^|[-+*/]\s*)[-+]", code.strip()):
            continue  # unary signs are python-only

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, float) and isinstance(res_my, float):
            if math.isclose(res_my, float(np.float32(res_py)), rel_tol=1e-5, abs_tol=1e-30):
                continue
            if math.isinf(res_my) or math.isnan(res_my):
                continue  # float32 overflows long before python floats do
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("division by zero"):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
