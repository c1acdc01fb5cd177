# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
__version__ = '1.0'
