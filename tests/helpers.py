import os


def make_image(directory, name, content=b"\x89PNG fake image bytes"):
    path = os.path.join(directory, name)
    with open(path, "wb") as f:
        f.write(content)
    return path
