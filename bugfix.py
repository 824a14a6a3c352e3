import sys

# Replaces CanvasRenderingContext2D with the Offscreen variant in the wasm-bindgen glue code.
# Workaround for https://github.com/rustwasm/wasm-bindgen/issues/1614
# Run after `wasm-pack build`: python bugfix.py

TARGET_PATH = 'pkg/wasm_demos_bg.js'
SEARCH = 'instanceof CanvasRenderingContext2D'
REPLACEMENT = 'instanceof OffscreenCanvasRenderingContext2D'
ENCODING = 'utf-8'

def fix(source: str) -> str:
    # first occurrence only
    return source.replace(SEARCH, REPLACEMENT, 1)

def patch(path: str = TARGET_PATH):
    with open(path, 'r', encoding=ENCODING, newline='') as f:
        js = f.read()

    js = fix(js)

    with open(path, 'w', encoding=ENCODING, newline='') as f:
        f.write(js)

    print('Bugfix complete')

def main():
    path = sys.argv[1] if len(sys.argv) > 1 else TARGET_PATH
    patch(path)

if __name__ == '__main__':
    main()
