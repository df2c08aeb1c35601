"""Application layer: conversion use cases and their ports."""
