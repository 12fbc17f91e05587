# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: 
"""
import sys
import asyncio

sys.path.append('..')
from cmdbuilder import CommandBuilder, Flag


async def main():
    cmd = CommandBuilder("jpegoptim")
    cmd << Flag("preserve")
    cmd << Flag("p")
    cmd << "file.jpg"
    cmd << ["1 1.jpg", "2.jpg"]
    cmd.arg("max", 3)
    cmd.arg("m", 3)
    cmd["other"] = "value"
    cmd["o"] = "another '\" value"
    print(cmd)
    print(cmd["max"])

    echo = CommandBuilder("echo").add_parameter("hello world")
    await echo.execute(lambda out, empty: print(repr(out), empty))
    print(repr(echo.execute()))

    cmd.reset()
    print(cmd)


if __name__ == '__main__':
    asyncio.run(main())
