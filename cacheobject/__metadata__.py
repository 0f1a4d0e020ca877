# -*- coding: utf-8; -*-

version = '0.1.0'
homepage = ''
